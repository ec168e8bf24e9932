"""Tool engine — category registry, executor, result cache."""
from .registry import (
    Category, CategoryDef, ExecutionContext, ToolDescriptor,
    register_category, get_category, resolve, all_categories, normalize_category,
)
from .forms import FormField, ValidationError
from .cache import ResultCache, ResultEnvelope
from .capability import CapabilityClient, CapabilityError
from .executor import execute_tool

# Auto-import builtin categories to trigger @register_category decorators
from .builtin import *  # noqa
