"""
Resolution of free-form model names to catalog entries.
"""

from typing import Callable, Optional

from .catalog import MODEL_CATALOG, ModelCatalog, ModelConfig


class ModelResolver:
    """
    Map a requested string to a catalog entry.

    Matching is case-insensitive on the trimmed input and checks, in order,
    the canonical name, the display label and the selector label. The last
    two are identical today but are kept as separate lookups so the catalog
    can diverge without changing resolution semantics.
    """

    def __init__(self, catalog: ModelCatalog = MODEL_CATALOG):
        self.catalog = catalog

    def _find(
        self, normalized: str, field: Callable[[ModelConfig], str]
    ) -> Optional[ModelConfig]:
        for model in self.catalog:
            if field(model).lower() == normalized:
                return model
        return None

    def resolve(self, raw_name: Optional[str]) -> Optional[ModelConfig]:
        if not raw_name:
            return None
        normalized = raw_name.lower().strip()
        if not normalized:
            return None

        return (
            self._find(normalized, lambda m: m.name)
            or self._find(normalized, lambda m: m.display_name)
            or self._find(normalized, lambda m: m.selector_text)
        )


DEFAULT_RESOLVER = ModelResolver()


def get_model_config(model_name: str) -> Optional[ModelConfig]:
    """Get a model configuration by name, display name or selector text."""
    return DEFAULT_RESOLVER.resolve(model_name)
