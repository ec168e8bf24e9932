"""Phishing simulator — canned educational scenarios, never sent anywhere."""
from ..forms import FormField
from ..registry import Category, register_category

SCENARIO_NOT_FOUND = "Scénario non trouvé"

SCENARIOS = {
    "banking": {
        "easy": "Votre compte sera suspendu. Cliquez ici pour vérifier.",
        "medium": "Activité suspecte détectée. Confirmez votre identité.",
        "hard": "Mise à jour de sécurité requise pour votre compte bancaire.",
    },
    "social": {
        "easy": "Vous avez reçu un message privé. Cliquez pour voir.",
        "medium": "Votre compte a été signalé. Vérifiez maintenant.",
        "hard": "Nouvelle politique de confidentialité à accepter.",
    },
    "work": {
        "easy": "Votre mot de passe expire aujourd'hui. Changez-le maintenant.",
        "medium": "Document urgent nécessitant votre signature électronique.",
        "hard": "Mise à jour du système RH - Action requise.",
    },
}


def scenario(template: str, difficulty: str) -> str:
    return SCENARIOS.get(template, {}).get(difficulty, SCENARIO_NOT_FOUND)


def _error(data):
    return {"error": "Erreur de simulation", "scenario": ""}


def render_phishing(result):
    return ["Scénario de phishing :", f'"{result}"']


@register_category(
    Category.PHISHING,
    fields=[
        FormField("template", type="choice", label="Type de scénario",
                  choices=("banking", "social", "work"), default="banking"),
        FormField("difficulty", type="choice", label="Difficulté",
                  choices=("easy", "medium", "hard"), default="medium"),
    ],
    render=render_phishing,
    on_error=_error,
    icon="users",
    color="bg-red-500/10 text-red-400 border-red-500/20",
)
def simulate_phishing(config, data, ctx):
    """Show a sample phishing message for awareness training."""
    return scenario(data["template"], data["difficulty"])
