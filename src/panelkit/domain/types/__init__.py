"""Shared domain types."""

from panelkit.domain.types.lifecycle import PanelState

__all__ = ["PanelState"]
