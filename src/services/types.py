from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Mapping, Optional, Union

from .errors import MalformedRecordShape, UnsupportedLanguageError

Language = Literal["en", "am"]

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "am")
FALLBACK_ORDER: tuple[Language, ...] = ("en", "am")

LOCALIZABLE_FIELDS = ("title", "description", "category", "ingredients", "steps")


def ensure_language(value: object) -> Language:
    if value not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(value)
    return value  # type: ignore[return-value]


def sibling_language(language: Language) -> Language:
    return "am" if ensure_language(language) == "en" else "en"


@dataclass(frozen=True)
class LanguagePair:
    source: Language
    target: Language

    @classmethod
    def from_source(cls, source: Language) -> "LanguagePair":
        return cls(source=ensure_language(source), target=sibling_language(source))

    @property
    def code(self) -> str:
        return f"{self.source}|{self.target}"

    @property
    def key(self) -> str:
        return f"{self.source}-{self.target}"


@dataclass(frozen=True)
class PlainText:
    """Legacy single-language value, shown as-is in every language."""
    value: str


@dataclass(frozen=True)
class LanguageMap:
    """Per-language values of a bilingual record. Non-string entries are dropped."""
    values: Mapping[str, str]

    def get(self, language: str) -> Optional[str]:
        return self.values.get(language)


LocalizedText = Union[PlainText, LanguageMap]


def parse_localized_text(field_name: str, raw: object) -> Optional[LocalizedText]:
    if raw is None:
        return None
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, Mapping):
        return LanguageMap({
            lang: value
            for lang, value in raw.items()
            if lang in SUPPORTED_LANGUAGES and isinstance(value, str)
        })
    raise MalformedRecordShape(field_name, raw)


class FieldStatus(str, Enum):
    TRANSLATED = "translated"
    FALLBACK = "fallback"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TextTranslation:
    text: str
    status: FieldStatus
    strategy: Optional[str] = None


@dataclass
class RecipeDraft:
    """A freshly authored recipe in a single language."""
    source_language: Language
    title: str
    description: str
    category: str
    ingredients: str
    steps: str

    def localizable_values(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in LOCALIZABLE_FIELDS}


@dataclass
class TranslationReport:
    fields: dict[str, FieldStatus] = field(default_factory=dict)
    strategies: dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def degraded(self) -> bool:
        """True when any field kept its source text or had nothing to translate."""
        return any(status != FieldStatus.TRANSLATED for status in self.fields.values())

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in FieldStatus}
        for status in self.fields.values():
            counts[status.value] += 1
        return counts


@dataclass
class TranslatedDraft:
    """Bilingual field maps plus the record-level translation flags."""
    source_language: Language
    fields: dict[str, dict[str, str]]
    report: TranslationReport
    auto_translated: bool
    translation_error: bool


@dataclass(frozen=True)
class LocalizedView:
    id: Optional[str]
    language: Language
    title: str
    description: str
    category: str
    ingredients: str
    steps: str
    original_language: Optional[str] = None
    approved: bool = False
    auto_translated: bool = False
    translation_error: bool = False
    author_name: Optional[str] = None
    video_url: Optional[str] = None
    has_image: bool = False
    created_at: Optional[str] = None
