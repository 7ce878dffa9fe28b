"""
Shared pieces of the entity form schemas.

Every admin form posts flat string values. ``EntityForm`` converts them
before field validation: empty URL inputs become ``None``, multi-line text
becomes a list (blank lines dropped), empty integer inputs become ``None``.
Edit forms require every language variant even though display falls back to
English.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError, field_validator


_HTTP_URL = TypeAdapter(HttpUrl)

URL_ERROR = "Must be a valid URL or empty."


def split_lines(value: Any) -> List[str]:
    """Newline-delimited text to a list, dropping blank lines. Kept lines stay verbatim."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        lines = [str(item) for item in value]
    else:
        lines = str(value).splitlines()
    return [line for line in lines if line.strip()]


def join_lines(value: Optional[List[str]]) -> str:
    return "\n".join(value or [])


def check_url(value: Any) -> Optional[str]:
    """Accept a well-formed http(s) URL or an empty value (-> None). Keeps the text verbatim."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        _HTTP_URL.validate_python(text)
    except ValidationError:
        raise ValueError(URL_ERROR)
    return text


class EntityForm(BaseModel):
    """Base class for admin form schemas."""

    model_config = ConfigDict(extra="ignore")

    # Field groups handled by the shared pre-validator
    url_fields: ClassVar[FrozenSet[str]] = frozenset()
    lines_fields: ClassVar[FrozenSet[str]] = frozenset()
    optional_int_fields: ClassVar[FrozenSet[str]] = frozenset({"order_index"})

    @field_validator("*", mode="before")
    @classmethod
    def coerce_form_value(cls, v, info):
        name = info.field_name
        if name in cls.url_fields:
            return check_url(v)
        if name in cls.lines_fields:
            return split_lines(v)
        if name in cls.optional_int_fields and isinstance(v, str) and not v.strip():
            return None
        return v


@dataclass
class ValidationResult:
    valid: bool
    value: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)


def _error_key(loc) -> str:
    return ".".join(str(part) for part in loc) or "__all__"


def _error_message(error: Mapping[str, Any]) -> str:
    message = error.get("msg", "Invalid value")
    # ValueErrors raised in validators come back prefixed
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return message


def validate(schema: Type[EntityForm], form_values: Mapping[str, Any]) -> ValidationResult:
    """Validate raw form values; never raises."""
    try:
        model = schema.model_validate(dict(form_values))
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            errors.setdefault(_error_key(error["loc"]), _error_message(error))
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult(valid=True, value=model.model_dump())
