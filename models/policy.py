"""
Banned model names.

Generic or ambiguous names (the UI's own "Model" placeholder in several
locales, or the generic "Sonar" family name) must never be treated as a
selection target, even when one happens to be a catalog identifier.
Matching is exact on the whole trimmed string, case-insensitive: a name
that merely contains a banned word stays allowed.
"""

from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict


class BannedPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    locale: str = "en"

    def matches(self, raw_name: str) -> bool:
        return raw_name.strip().casefold() == self.word.casefold()


BANNED_MODEL_PATTERNS: Tuple[BannedPattern, ...] = (
    BannedPattern(word="model", locale="en"),
    BannedPattern(word="sonar", locale="en"),  # too generic
    BannedPattern(word="модель", locale="ru"),
    BannedPattern(word="modelo", locale="es/pt"),
    BannedPattern(word="モデル", locale="ja"),
)


class BannedNamePolicy:
    """Locale-aware denylist of generic model names."""

    def __init__(self, patterns: Iterable[BannedPattern] = BANNED_MODEL_PATTERNS):
        self.patterns: Tuple[BannedPattern, ...] = tuple(patterns)

    def is_banned(self, raw_name: str) -> bool:
        return any(pattern.matches(raw_name) for pattern in self.patterns)

    def is_allowed(self, raw_name: str) -> bool:
        return not self.is_banned(raw_name)


DEFAULT_POLICY = BannedNamePolicy()


def is_model_allowed(model_name: str) -> bool:
    """Validate a model name against the default banned patterns."""
    return DEFAULT_POLICY.is_allowed(model_name)
