"""Rendering environment protocol."""

from typing import Any, Callable, Optional, Protocol, TypeVar

__all__ = ["ClickListener", "N", "RenderEnvironment"]

# Node type of the concrete document model
N = TypeVar("N")

ClickListener = Callable[[], Any]


class RenderEnvironment(Protocol[N]):
    """Protocol for the document model components render into.

    The environment turns markup into nodes and performs the handful of
    mutations a component needs: class and style changes, visibility,
    reparenting and click listeners.

    Type Parameters:
        N: The node type
    """

    def parse(self, markup: str) -> N:
        """Parse markup into a single detached node.

        Args:
            markup: HTML-like string with one root element

        Returns:
            The root node
        """
        ...

    def query(self, selector: str) -> Optional[N]:
        """Find the first node in the document matching a selector.

        Returns:
            The node, or None if nothing matches
        """
        ...

    def children_by_class(self, node: N, css_class: str) -> list[N]:
        """Return the direct children of ``node`` carrying ``css_class``."""
        ...

    def find_by_class(self, node: N, css_class: str) -> Optional[N]:
        """Return the first descendant of ``node`` carrying ``css_class``."""
        ...

    def add_class(self, node: N, css_class: str) -> None: ...

    def remove_class(self, node: N, css_class: str) -> None: ...

    def has_class(self, node: N, css_class: str) -> bool: ...

    def set_visible(self, node: N, visible: bool) -> None: ...

    def is_visible(self, node: N) -> bool: ...

    def append_child(self, parent: N, child: N) -> None:
        """Attach ``child`` as the last child of ``parent``, detaching it from any previous parent."""
        ...

    def get_style(self, node: N, prop: str) -> Optional[str]:
        """Return the value of a style property, or None when it is not set."""
        ...

    def set_style(self, node: N, prop: str, value: str) -> None: ...

    def set_text(self, node: N, text: str) -> None:
        """Replace the content of ``node`` with plain text."""
        ...

    def on_click(self, node: N, listener: ClickListener) -> None:
        """Run ``listener`` whenever ``node`` (or one of its descendants) is clicked."""
        ...

    def off_click(self, node: N) -> None:
        """Remove every click listener registered on ``node``."""
        ...
