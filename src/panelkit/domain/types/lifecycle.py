"""Lifecycle-related domain types."""

from enum import Enum

__all__ = ["PanelState"]


class PanelState(Enum):
    """Display state of a panel's body region.

    A panel is always in exactly one of these states. The state is derived
    from the collapsed marker class on the panel's node, never stored.
    """

    EXPANDED = "expanded"
    COLLAPSED = "collapsed"
