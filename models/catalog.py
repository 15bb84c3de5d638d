"""
Model catalog: the fixed registry of models selectable in the Perplexity UI.

The catalog is built once at import time and validated immediately, so a
broken table (no default, duplicate names, diverging selector text) fails
at startup instead of surfacing as a runtime selection error.
"""

import re
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidCatalogError, MissingDefaultModelError

_VERSION_SUFFIX = re.compile(r"[-\s]?\d.*$")


class ModelConfig(BaseModel):
    """One selectable model as it appears in the model dropdown."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    selector_text: str
    is_default: bool = False

    @property
    def family(self) -> str:
        """Vendor/family name, e.g. 'claude' for 'Claude Sonnet 4.6', 'gpt' for 'GPT-5.2'."""
        first_word = self.display_name.split()[0] if self.display_name.strip() else ""
        return _VERSION_SUFFIX.sub("", first_word).lower()


class ModelCatalog:
    """Read-only lookup table over a fixed set of ModelConfig entries."""

    def __init__(self, entries: Iterable[ModelConfig]):
        self._entries: Tuple[ModelConfig, ...] = tuple(entries)

    def __iter__(self) -> Iterator[ModelConfig]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> Tuple[ModelConfig, ...]:
        return self._entries

    def names(self) -> List[str]:
        return [m.name for m in self._entries]

    def get(self, name: str) -> Optional[ModelConfig]:
        """Exact lookup by canonical name."""
        for model in self._entries:
            if model.name == name:
                return model
        return None

    def default(self) -> ModelConfig:
        """
        Return the default entry.

        Raises:
            MissingDefaultModelError: no entry is flagged as default
        """
        for model in self._entries:
            if model.is_default:
                return model
        raise MissingDefaultModelError()

    def validate_integrity(self) -> None:
        """
        Check the catalog invariants.

        Raises:
            MissingDefaultModelError: no default entry
            InvalidCatalogError: any other invariant is violated
        """
        for model in self._entries:
            if not (model.name and model.display_name and model.selector_text):
                raise InvalidCatalogError(f"entry {model.name!r} has empty fields")
            if model.selector_text != model.display_name:
                raise InvalidCatalogError(
                    f"selector text {model.selector_text!r} differs from display name "
                    f"{model.display_name!r}"
                )

        names = [m.name for m in self._entries]
        if len(set(names)) != len(names):
            raise InvalidCatalogError("duplicate model names")

        display_names = [m.display_name for m in self._entries]
        if len(set(display_names)) != len(display_names):
            raise InvalidCatalogError("duplicate display names")

        defaults = [m for m in self._entries if m.is_default]
        if not defaults:
            raise MissingDefaultModelError()
        if len(defaults) > 1:
            raise InvalidCatalogError(
                f"multiple default models: {', '.join(m.name for m in defaults)}"
            )


# Models displayed in the Perplexity model selection dropdown
AVAILABLE_MODELS: Tuple[ModelConfig, ...] = (
    ModelConfig(
        name="claude-sonnet-4.6",
        display_name="Claude Sonnet 4.6",
        selector_text="Claude Sonnet 4.6",
        is_default=True,
    ),
    ModelConfig(
        name="gemini-3.1-pro",
        display_name="Gemini 3.1 Pro",
        selector_text="Gemini 3.1 Pro",
    ),
    ModelConfig(
        name="gemini-3-flash",
        display_name="Gemini 3 Flash",
        selector_text="Gemini 3 Flash",
    ),
    ModelConfig(name="gpt-5.2", display_name="GPT-5.2", selector_text="GPT-5.2"),
    ModelConfig(name="grok-4.1", display_name="Grok 4.1", selector_text="Grok 4.1"),
    ModelConfig(name="kimi-k2.5", display_name="Kimi K2.5", selector_text="Kimi K2.5"),
    ModelConfig(
        name="claude-opus-4.6",
        display_name="Claude Opus 4.6",
        selector_text="Claude Opus 4.6",
    ),
    ModelConfig(name="reasoning", display_name="Reasoning", selector_text="Reasoning"),
    # Listed so it resolves, then rejected by the banned-name policy
    ModelConfig(name="sonar", display_name="Sonar", selector_text="Sonar"),
)

MODEL_CATALOG = ModelCatalog(AVAILABLE_MODELS)
MODEL_CATALOG.validate_integrity()


def get_default_model() -> ModelConfig:
    return MODEL_CATALOG.default()
