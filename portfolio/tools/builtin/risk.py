"""Risk calculator — weighted score over four 1-10 ratings."""
from ..forms import FormField
from ..registry import Category, register_category

# Weights in percent, applied in field order
RISK_WEIGHTS = (("network", 30), ("users", 20), ("data", 30), ("compliance", 20))

# (minimum score, level, color), checked top-down
RISK_LEVELS = (
    (7, "Critique", "text-red-400"),
    (5, "Élevé", "text-orange-400"),
    (3, "Moyen", "text-yellow-400"),
)
LOWEST_LEVEL = ("Faible", "text-green-400")


def risk_score(network: int, users: int, data: int, compliance: int) -> float:
    """Unrounded weighted score. Integer arithmetic keeps threshold boundaries exact."""
    values = {"network": network, "users": users, "data": data, "compliance": compliance}
    return sum(values[name] * weight for name, weight in RISK_WEIGHTS) / 100


def risk_level(score: float):
    for minimum, level, color in RISK_LEVELS:
        if score >= minimum:
            return level, color
    return LOWEST_LEVEL


def _error(data):
    return {"error": "Erreur de calcul", "level": "Erreur", "score": 0.0, "color": "text-gray-400"}


def render_risk(result):
    return [result["level"], f"Score: {result['score']:.1f}/10"]


@register_category(
    Category.RISK,
    fields=[
        FormField("network", type="int", label="Sécurité réseau (1-10)", min=1, max=10, default=5),
        FormField("users", type="int", label="Formation utilisateurs (1-10)", min=1, max=10, default=5),
        FormField("data", type="int", label="Protection des données (1-10)", min=1, max=10, default=5),
        FormField("compliance", type="int", label="Conformité (1-10)", min=1, max=10, default=5),
    ],
    render=render_risk,
    on_error=_error,
    icon="alert-triangle",
    color="bg-yellow-500/10 text-yellow-400 border-yellow-500/20",
)
def calculate_risk(config, data, ctx):
    """Estimate the security risk level of an organisation."""
    score = risk_score(data["network"], data["users"], data["data"], data["compliance"])
    level, color = risk_level(score)
    return {"level": level, "score": round(score, 1), "color": color}
