"""Domain protocols - interfaces for all implementations.

Components talk to their rendering substrate only through these structural
types, so any document model that satisfies them can host a component.
"""

from panelkit.domain.protocols.environment import ClickListener, N, RenderEnvironment

__all__ = [
    "ClickListener",
    "N",
    "RenderEnvironment",
]
