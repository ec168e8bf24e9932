"""Form contracts — field declarations and raw input parsing."""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


class ValidationError(ValueError):
    """Raised before dispatch when submitted input does not satisfy the form contract."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        detail = "; ".join(f"{k}: {v}" for k, v in errors.items())
        super().__init__(f"Invalid input ({detail})")


@dataclass(frozen=True)
class FormField:
    name: str
    type: str = "text"  # "text" | "int" | "email" | "url" | "choice"
    label: str = ""
    required: bool = True
    default: Any = None
    min: Optional[int] = None
    max: Optional[int] = None
    choices: Sequence[str] = ()
    placeholder: str = ""

    def describe(self) -> Dict[str, Any]:
        """JSON-friendly description for clients building the form."""
        out = {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "required": self.required,
            "default": self.default,
        }
        if self.type == "int":
            out["min"] = self.min
            out["max"] = self.max
        if self.choices:
            out["choices"] = list(self.choices)
        if self.placeholder:
            out["placeholder"] = self.placeholder
        return out


def _parse_int(field: FormField, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError("must be an integer")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError("must be an integer")
        value = int(raw)
    else:
        text = str(raw).strip()
        if not re.fullmatch(r"[+-]?\d+", text):
            raise ValueError("must be an integer")
        value = int(text)

    if field.min is not None and value < field.min:
        raise ValueError(f"must be between {field.min} and {field.max}" if field.max is not None
                         else f"must be >= {field.min}")
    if field.max is not None and value > field.max:
        raise ValueError(f"must be between {field.min} and {field.max}" if field.min is not None
                         else f"must be <= {field.max}")
    return value


def _parse_text(field: FormField, raw: Any) -> str:
    if not isinstance(raw, (str, int, float)) or isinstance(raw, bool):
        raise ValueError("must be a string")
    value = str(raw).strip()

    if field.type == "email" and not _EMAIL_RE.match(value):
        raise ValueError("must be a valid email address")
    if field.type == "url" and not _URL_RE.match(value):
        raise ValueError("must be an http(s) URL")
    if field.type == "choice" and value not in field.choices:
        raise ValueError(f"must be one of: {', '.join(field.choices)}")
    return value


def parse_input(fields: List[FormField], raw: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Validate raw form data against a field contract.

    Returns a new dict holding only the declared fields, typed and with
    defaults applied. Unknown keys are dropped. All field errors are
    collected and raised together as a single ValidationError.
    """
    raw = raw or {}
    data: Dict[str, Any] = {}
    errors: Dict[str, str] = {}

    for field in fields:
        value = raw.get(field.name)
        if value is None or (isinstance(value, str) and not value.strip()):
            if field.default is not None:
                data[field.name] = field.default
            elif field.required:
                errors[field.name] = "is required"
            continue

        try:
            if field.type == "int":
                data[field.name] = _parse_int(field, value)
            else:
                data[field.name] = _parse_text(field, value)
        except ValueError as e:
            errors[field.name] = str(e)

    if errors:
        raise ValidationError(errors)
    return data
