"""
Perplexity Model Selector - Exception Hierarchy

Three branches under ModelSelectorError:

    ConfigurationError  broken catalog data, raised at import and never caught
    ModelError          bad requested name, replaced by the default model
    BrowserError        page automation failure, logged and reported as not switched
"""

import time
from typing import Any, List, Optional

# ==================== BASE EXCEPTION ====================


class ModelSelectorError(Exception):
    """Carries the request ID, a creation timestamp and free-form context (model names, selectors)."""

    def __init__(self, message: str, req_id: Optional[str] = None, **context: Any):
        self.message = message
        self.req_id = req_id
        self.context = context
        self.timestamp = time.time()

        super().__init__(f"[{req_id}] {message}" if req_id else message)

    def __repr__(self) -> str:
        parts = [f"message={self.message!r}", f"req_id={self.req_id!r}"]
        if self.context:
            parts.append(f"context={self.context}")
        return f"{type(self).__name__}({', '.join(parts)})"


# ==================== CONFIGURATION ERRORS (fatal) ====================


class ConfigurationError(ModelSelectorError):
    """Catalog integrity fault; aborts startup."""


class MissingDefaultModelError(ConfigurationError):
    """The model catalog has no entry flagged as default."""

    def __init__(self, message: str = "No default model configured", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidCatalogError(ConfigurationError):
    """The model catalog violates one of its integrity rules."""

    def __init__(self, reason: str, **kwargs: Any):
        message = f"Invalid model catalog: {reason}"
        super().__init__(message, reason=reason, **kwargs)


# ==================== MODEL ERRORS (recovered by fallback) ====================


class ModelError(ModelSelectorError):
    """Requested name is unknown or banned."""


class InvalidModelError(ModelError):
    """Requested model does not exist in the catalog."""

    def __init__(
        self, model_name: str, available_models: Optional[List[str]] = None, **kwargs: Any
    ):
        message = f"Model '{model_name}' not found"
        if available_models:
            message += f". Available: {', '.join(available_models)}"
        super().__init__(
            message, model_name=model_name, available_models=available_models, **kwargs
        )
        self.model_name = model_name


class BannedModelError(ModelError):
    """Requested model resolves to a generic name that must never be selected."""

    def __init__(self, model_name: str, **kwargs: Any):
        message = f"Model '{model_name}' is not allowed"
        super().__init__(message, model_name=model_name, **kwargs)
        self.model_name = model_name


# ==================== BROWSER ERRORS (recovered, logged) ====================


class BrowserError(ModelSelectorError):
    """Model control missing, option not found, or a click/wait timed out."""


class SelectionUnavailableError(BrowserError):
    """No recognizable model selection control is present on the page."""

    def __init__(
        self, message: str = "Model selection UI not available", **kwargs: Any
    ):
        super().__init__(message, **kwargs)


class ModelOptionNotFoundError(BrowserError):
    """No element for the target model was found after all matching strategies."""

    def __init__(
        self, display_name: str, strategies: Optional[List[str]] = None, **kwargs: Any
    ):
        message = f"Could not find model '{display_name}' in UI"
        if strategies:
            message += f" (tried: {', '.join(strategies)})"
        super().__init__(
            message, display_name=display_name, strategies=strategies, **kwargs
        )


class ElementInteractionError(BrowserError):
    """Failed to interact with a page element (click, read, key press)."""

    pass


__all__ = [
    # Base
    "ModelSelectorError",
    # Configuration errors
    "ConfigurationError",
    "MissingDefaultModelError",
    "InvalidCatalogError",
    # Model errors
    "ModelError",
    "InvalidModelError",
    "BannedModelError",
    # Browser errors
    "BrowserError",
    "SelectionUnavailableError",
    "ModelOptionNotFoundError",
    "ElementInteractionError",
]
