"""Category registry — decorator-based strategy registration and lookup."""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from .forms import FormField

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Outil non implémenté"


class Category(str, Enum):
    PASSWORD = "password"
    RISK = "risk"
    PHISHING = "phishing"
    LEAK = "leak"
    SECURITY = "security"
    SSL = "ssl"
    WEB_SECURITY = "web security"
    PENETRATION_TESTING = "penetration testing"
    NETWORK_SECURITY = "network security"
    NETWORK_ANALYSIS = "network analysis"


class RegistrationError(ValueError):
    pass


def normalize_category(label: Any) -> str:
    """'  Web   Security ' -> 'web security'"""
    return " ".join(str(label or "").split()).lower()


def _category_key(label: Any) -> Optional[Category]:
    if isinstance(label, Category):
        return label
    try:
        return Category(normalize_category(label))
    except ValueError:
        return None


@dataclass(frozen=True)
class ToolDescriptor:
    id: str
    name: str
    description: str = ""
    category: str = ""
    config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view over a private copy; the engine never mutates descriptors
        object.__setattr__(self, "config", MappingProxyType(dict(self.config or {})))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "config": dict(self.config),
        }


@dataclass
class ExecutionContext:
    """Collaborators handed to every strategy."""
    rng: random.Random = field(default_factory=random.Random)
    capabilities: Any = None  # CapabilityClient, required by delegated categories


def is_error_payload(payload: Any) -> bool:
    return isinstance(payload, dict) and bool(payload.get("error"))


@dataclass
class CategoryDef:
    key: str
    handler: Callable[..., Any]
    fields: List[FormField]
    render: Callable[[Any], List[str]]
    on_error: Callable[[Dict[str, Any]], Any]
    delegated: bool = False
    icon: str = "shield"
    color: str = "bg-gray-500/10 text-gray-400 border-gray-500/20"
    description: str = ""

    def view(self, payload: Any) -> List[str]:
        """Display lines for a result payload; error payloads render as an error block."""
        if is_error_payload(payload):
            return [f"Erreur: {payload['error']}"]
        try:
            return self.render(payload)
        except Exception as e:
            # Unexpected reply shape from a remote capability
            logger.error(f"Render failed for {self.key}: {e}", exc_info=True)
            return [str(payload)]

    def describe(self) -> Dict[str, Any]:
        return {
            "category_key": self.key,
            "icon": self.icon,
            "color": self.color,
            "delegated": self.delegated,
            "fields": [f.describe() for f in self.fields],
        }


_categories: Dict[Category, CategoryDef] = {}


def register_category(
    category: Any,
    fields: Optional[List[FormField]] = None,
    render: Optional[Callable[[Any], List[str]]] = None,
    on_error: Optional[Callable[[Dict[str, Any]], Any]] = None,
    delegated: bool = False,
    icon: str = "shield",
    color: str = "bg-gray-500/10 text-gray-400 border-gray-500/20",
):
    """Decorator to register the execution strategy of a category."""
    key = _category_key(category)
    if key is None:
        raise RegistrationError(f"Unknown category: {category!r}")
    if key in _categories:
        raise RegistrationError(f"Category already registered: {key.value}")

    def decorator(func):
        _categories[key] = CategoryDef(
            key=key.value,
            handler=func,
            fields=list(fields or []),
            render=render or (lambda payload: [str(payload)]),
            on_error=on_error or (lambda data: {"error": "Erreur d'exécution"}),
            delegated=delegated,
            icon=icon,
            color=color,
            description=func.__doc__ or "",
        )
        logger.info(f"Registered category: {key.value}")
        return func
    return decorator


def _not_implemented(config, data, ctx) -> str:
    return FALLBACK_MESSAGE


FALLBACK = CategoryDef(
    key="fallback",
    handler=_not_implemented,
    fields=[],
    render=lambda payload: [str(payload)],
    on_error=lambda data: FALLBACK_MESSAGE,
)


def get_category(label: Any) -> Optional[CategoryDef]:
    key = _category_key(label)
    return _categories.get(key) if key is not None else None


def resolve(label: Any) -> CategoryDef:
    """Registered definition for a category label, or the fallback variant."""
    defn = get_category(label)
    if defn is None:
        logger.debug(f"No strategy for category {label!r}, using fallback")
        return FALLBACK
    return defn


def all_categories() -> Dict[str, CategoryDef]:
    return {k.value: v for k, v in _categories.items()}
