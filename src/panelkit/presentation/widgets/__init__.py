"""
Widgets for panelkit.
"""

from .component import Component
from .config import ComponentConfig, PanelConfig
from .panel import Panel

__all__ = [
    "Component",
    "ComponentConfig",
    "Panel",
    "PanelConfig",
]
