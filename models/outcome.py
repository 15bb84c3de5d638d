"""
Per-invocation results of the UI selection engine. Never persisted.
"""

from typing import Optional

from pydantic import BaseModel


class UICapabilities(BaseModel):
    """Probed shape of the current UI variant."""

    has_more_affordance: bool = False
    has_reasoning_toggle: bool = False
    dropdown_is_portal: bool = False


class DetectedModelControl(BaseModel):
    """The control currently showing the active model (or the collapsed "More" affordance)."""

    text: str
    is_more_affordance: bool = False


class SelectionOutcome(BaseModel):
    requested_name: Optional[str] = None
    canonical_name: str
    ui_available: bool = False
    switched: bool = False
    already_selected: bool = False
    reasoning_enabled: bool = False
    # Name of the matching strategy that activated the option
    strategy: Optional[str] = None
