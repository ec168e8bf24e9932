"""HTTP security header analysis — delegated to the remote header analyzer."""
from ..capability import HEADER_ANALYZER
from ..forms import FormField
from ..registry import Category, register_category


def _error(data):
    return {"error": "Erreur d'analyse", "score": 0, "grade": "F", "securityHeaders": {}, "recommendations": []}


def render_headers(result):
    lines = [f"Score: {result.get('score', 0)}%", f"Note: {result.get('grade', 'F')}"]
    for header, info in (result.get("securityHeaders") or {}).items():
        mark = "✅" if info.get("present") else "❌"
        lines.append(f"{mark} {header} - {info.get('description', '')}")
    recommendations = result.get("recommendations") or []
    if recommendations:
        lines.append("Recommandations :")
        for rec in recommendations:
            if isinstance(rec, dict):
                lines.append(f"• {rec.get('header', '')}: {rec.get('description', '')}")
            else:
                lines.append(f"• {rec}")
    return lines


@register_category(
    Category.SECURITY,
    fields=[FormField("url", type="url", label="URL du site web", placeholder="https://example.com")],
    render=render_headers,
    on_error=_error,
    delegated=True,
    icon="lock",
    color="bg-green-500/10 text-green-400 border-green-500/20",
)
async def analyze_headers(config, data, ctx):
    """Grade the HTTP security headers of a website."""
    return await ctx.capabilities.invoke(HEADER_ANALYZER, {"url": data["url"]})
