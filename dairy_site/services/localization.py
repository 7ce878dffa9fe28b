"""
Localized field resolution and language negotiation.

Every user-facing string is stored as three parallel columns
(``title_en``, ``title_ar``, ``title_fr``). English is always the fallback:
a missing or empty Arabic/French value resolves to the English one.
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "ar", "fr")
FALLBACK_LANGUAGES = ("ar", "fr")
RTL_LANGUAGES = ("ar",)

LANGUAGE_COOKIE = "lang"

LANGUAGE_LABELS = {
    "en": "English",
    "ar": "العربية",
    "fr": "Français",
}


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def resolve(entity: Optional[Mapping[str, Any]], field: str, language: str, default: Any = "") -> Any:
    """
    Return the display value of ``field`` for ``language``.

    ``ar``/``fr`` values win when non-empty, otherwise ``<field>_en`` is
    returned. Never raises: a missing entity or English value gives ``default``.
    """
    if not entity:
        return default

    if language in FALLBACK_LANGUAGES:
        value = entity.get(f"{field}_{language}")
        if not _is_empty(value):
            return value

    value = entity.get(f"{field}_{DEFAULT_LANGUAGE}")
    if value is None:
        return default
    return value


class LocalizedString(BaseModel):
    """A string with an English default and per-language overrides."""

    default: str = ""
    overrides: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Mapping[str, Any], field: str) -> "LocalizedString":
        overrides = {}
        for language in FALLBACK_LANGUAGES:
            value = row.get(f"{field}_{language}")
            if not _is_empty(value):
                overrides[language] = value
        return cls(default=row.get(f"{field}_{DEFAULT_LANGUAGE}") or "", overrides=overrides)

    def resolve(self, language: str) -> str:
        value = self.overrides.get(language)
        if _is_empty(value):
            return self.default
        return value

    def to_columns(self, field: str) -> Dict[str, Optional[str]]:
        columns: Dict[str, Optional[str]] = {f"{field}_{DEFAULT_LANGUAGE}": self.default}
        for language in FALLBACK_LANGUAGES:
            columns[f"{field}_{language}"] = self.overrides.get(language)
        return columns


def localized_columns(field: str) -> List[str]:
    """Column names of a localized field, English first."""
    return [f"{field}_{language}" for language in SUPPORTED_LANGUAGES]


def normalize_language(tag: Optional[str]) -> Optional[str]:
    """Reduce ``fr-FR``/``AR`` style tags to a supported language or None."""
    if not tag:
        return None
    primary = tag.strip().lower().replace("_", "-").split("-")[0]
    if primary in SUPPORTED_LANGUAGES:
        return primary
    return None


def parse_accept_language(header: Optional[str]) -> Optional[str]:
    """Pick the best supported language from an Accept-Language header."""
    if not header:
        return None

    candidates = []
    for index, part in enumerate(header.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        candidates.append((-quality, index, tag))

    for _, _, tag in sorted(candidates):
        language = normalize_language(tag)
        if language:
            return language
    return None


def negotiate_language(
    query_lang: Optional[str] = None,
    cookie_lang: Optional[str] = None,
    accept_language: Optional[str] = None,
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """Query parameter, then cookie, then Accept-Language, then the default."""
    return (
        normalize_language(query_lang)
        or normalize_language(cookie_lang)
        or parse_accept_language(accept_language)
        or default
    )


def text_direction(language: str) -> str:
    return "rtl" if language in RTL_LANGUAGES else "ltr"
