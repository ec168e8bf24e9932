"""Password generator — delegated to the remote generator function."""
import logging

from ..capability import PASSWORD_GENERATOR
from ..registry import Category, register_category

logger = logging.getLogger(__name__)

PASSWORD_LENGTH = 16


def _error(data):
    return {
        "error": "Erreur de génération",
        "password": "Erreur de génération",
        "strength": "Erreur",
        "entropy": 0,
        "length": 0,
    }


def render_password(result):
    return [
        f"Mot de passe généré : {result.get('password', '')}",
        f"Force : {result.get('strength', '')}",
        f"Entropie : {result.get('entropy', 0)} bits",
        f"Longueur : {result.get('length', 0)} chars",
    ]


@register_category(
    Category.PASSWORD,
    render=render_password,
    on_error=_error,
    delegated=True,
    icon="key",
    color="bg-blue-500/10 text-blue-400 border-blue-500/20",
)
async def generate_password(config, data, ctx):
    """Generate a strong random password."""
    body = {
        "length": PASSWORD_LENGTH,
        "includeNumbers": bool(config.get("includeNumbers", True)),
        "includeSpecialChars": bool(config.get("includeSpecialChars", True)),
        "includeUppercase": True,
        "includeLowercase": True,
    }
    return await ctx.capabilities.invoke(PASSWORD_GENERATOR, body)
