"""Data leak check — delegated to the remote breach checker."""
from ..capability import BREACH_CHECKER
from ..forms import FormField
from ..registry import Category, register_category


def _error(data):
    return {
        "error": "Erreur de vérification",
        "isCompromised": False,
        "breachCount": 0,
        "breaches": [],
    }


def render_leak(result):
    if not result.get("isCompromised"):
        return [
            "✅ Aucune fuite détectée",
            "Votre email n'apparaît pas dans les fuites de données connues.",
        ]

    lines = [f"⚠️ {result.get('breachCount', 0)} fuite(s) de données détectée(s)"]
    for breach in result.get("breaches", []):
        lines.append(f"- {breach.get('name', '?')} ({breach.get('date', '?')}) [{breach.get('severity', '?')}]")
        records = breach.get("records")
        if isinstance(records, int):
            lines.append(f"  {records:,} enregistrements affectés")
        data_types = breach.get("dataTypes") or []
        if data_types:
            lines.append(f"  Données: {', '.join(data_types)}")
    recommendations = result.get("recommendations") or []
    if recommendations:
        lines.append("Recommandations:")
        lines.extend(f"• {rec}" for rec in recommendations)
    return lines


@register_category(
    Category.LEAK,
    fields=[FormField("email", type="email", label="Adresse email", placeholder="votre@email.com")],
    render=render_leak,
    on_error=_error,
    delegated=True,
    icon="shield",
    color="bg-purple-500/10 text-purple-400 border-purple-500/20",
)
async def check_data_leak(config, data, ctx):
    """Check whether an email address appears in known data breaches."""
    return await ctx.capabilities.invoke(BREACH_CHECKER, {"email": data["email"]})
