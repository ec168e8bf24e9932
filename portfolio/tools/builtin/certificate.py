"""SSL/TLS configuration test — delegated to the remote SSL checker."""
from ..capability import SSL_CHECKER
from ..forms import FormField
from ..registry import Category, register_category


def _error(data):
    return {
        "error": "Erreur de test SSL",
        "score": 0,
        "grade": "F",
        "ssl": {"enabled": False, "protocol": "", "hsts": {"enabled": False, "maxAge": 0}},
        "issues": [],
    }


def render_ssl(result):
    lines = [f"Score: {result.get('score', 0)}%", f"Note: {result.get('grade', 'F')}"]
    ssl = result.get("ssl") or {}
    if ssl.get("enabled"):
        lines.append(f"Protocole: {ssl.get('protocol', '')}")
        hsts = ssl.get("hsts") or {}
        if hsts.get("enabled"):
            lines.append(f"HSTS: Activé (max-age: {hsts.get('maxAge', 0)}s)")
        else:
            lines.append("HSTS: Non configuré")
    issues = result.get("issues") or []
    if issues:
        lines.append("Problèmes détectés :")
        lines.extend(f"• [{str(i.get('severity', '')).upper()}] {i.get('description', '')}" for i in issues)
    return lines


@register_category(
    Category.SSL,
    fields=[FormField("domain", label="Nom de domaine", placeholder="example.com")],
    render=render_ssl,
    on_error=_error,
    delegated=True,
    icon="globe",
    color="bg-cyan-500/10 text-cyan-400 border-cyan-500/20",
)
async def check_ssl(config, data, ctx):
    """Check the TLS setup of a domain."""
    return await ctx.capabilities.invoke(SSL_CHECKER, {"domain": data["domain"]})
