"""
Model validation: the single gate between caller input and every consumer.

get_validated_model() is total. Whatever it is given, it returns the
canonical name of a real, non-banned catalog entry, falling back to the
default model (with a warning) on a miss or a policy rejection.
"""

import logging
from typing import Optional

from config.constants import LOGGER_NAME

from .catalog import MODEL_CATALOG, ModelCatalog, ModelConfig
from .exceptions import BannedModelError, InvalidModelError
from .policy import DEFAULT_POLICY, BannedNamePolicy
from .resolution import ModelResolver

logger = logging.getLogger(LOGGER_NAME)


class ModelValidator:
    def __init__(
        self,
        catalog: ModelCatalog = MODEL_CATALOG,
        resolver: Optional[ModelResolver] = None,
        policy: BannedNamePolicy = DEFAULT_POLICY,
    ):
        self.catalog = catalog
        self.resolver = resolver or ModelResolver(catalog)
        self.policy = policy

    def validate(self, raw_name: str) -> ModelConfig:
        """
        Strictly resolve and check a model name.

        Raises:
            InvalidModelError: the name matches no catalog entry
            BannedModelError: the name resolves to a banned generic entry
        """
        model = self.resolver.resolve(raw_name)
        if model is None:
            raise InvalidModelError(raw_name, available_models=self.catalog.names())
        if not self.policy.is_allowed(model.name):
            raise BannedModelError(raw_name)
        return model

    def get_validated_config(
        self, raw_name: Optional[str], log: Optional[logging.Logger] = None
    ) -> ModelConfig:
        """Total lookup; misses and rejections are reported to ``log`` (module logger by default)."""
        log = log or logger
        if not raw_name or not raw_name.strip():
            return self.catalog.default()

        try:
            return self.validate(raw_name)
        except InvalidModelError:
            log.warning(f'[Model] 模型 "{raw_name}" 未找到, 使用默认模型')
        except BannedModelError:
            log.warning(f'[Model] 模型 "{raw_name}" 不允许使用, 使用默认模型')
        return self.catalog.default()

    def get_validated_model(
        self, raw_name: Optional[str], log: Optional[logging.Logger] = None
    ) -> str:
        return self.get_validated_config(raw_name, log).name


DEFAULT_VALIDATOR = ModelValidator()


def get_validated_config(
    model_name: Optional[str], log: Optional[logging.Logger] = None
) -> ModelConfig:
    return DEFAULT_VALIDATOR.get_validated_config(model_name, log)


def get_validated_model(
    model_name: Optional[str], log: Optional[logging.Logger] = None
) -> str:
    """
    Filter a requested model name to a valid one.

    Returns:
        The canonical name of the requested model, or of the default model
        when the request is absent, unknown or banned.
    """
    return DEFAULT_VALIDATOR.get_validated_model(model_name, log)
