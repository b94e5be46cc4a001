"""
Panel - a collapsible component with a titlebar and a body.

A collapsed panel keeps its titlebar visible and hides its body. Hiding is a
stylesheet concern: the panel only toggles ``config.collapsed_class`` on its
node.
"""

from typing import Any, ClassVar, Optional

from panelkit.domain.types import PanelState
from panelkit.logger import get_logger
from panelkit.presentation.template import Template
from panelkit.presentation.widgets.component import Component
from panelkit.presentation.widgets.config import PanelConfig

logger = get_logger("widgets.panel")


class Panel(Component):
    """
    A panel with a titlebar and a collapsible body.

    The titlebar and body are rendered from their own templates before the
    main template, which embeds them through the ``titlebar_html`` and
    ``body_html`` values. Clicking the collapse tool in the titlebar toggles
    the panel.

    Events:
        collapse(panel): the panel was collapsed
        expand(panel): the panel was expanded
    """

    EVENTS = ("collapse", "expand")

    CONFIG_MODEL: ClassVar[type[PanelConfig]] = PanelConfig

    titlebar_template: ClassVar[Template] = Template(
        '<div class="{titlebar_class}">',
        "<h3>{title}</h3>",
        '<div class="{collapse_tool_class}" title="{collapse_tooltip}"></div>',
        "</div>",
    )

    body_template: ClassVar[Template] = Template(
        '<div class="{body_class}">',
        "</div>",
    )

    template: ClassVar[Template] = Template(
        '<div class="{css_class}">',
        "{titlebar_html}",
        "{body_html}",
        "</div>",
    )

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.titlebar: Any = None
        self.body: Any = None
        self.collapse_tool: Any = None
        self._titlebar_html = ""
        self._body_html = ""

    def render_values(self) -> dict[str, Any]:
        return {
            **super().render_values(),
            "titlebar_html": self._titlebar_html,
            "body_html": self._body_html,
        }

    def render(self, container: Any = None) -> Any:
        values = self.template_values()
        self._titlebar_html = self.titlebar_template.render(values)
        self._body_html = self.body_template.render(values)

        node = super().render(container)

        env = self.environment
        self.titlebar = _first(env.children_by_class(node, self.config.titlebar_class))
        self.body = _first(env.children_by_class(node, self.config.body_class))
        if self.collapse_tool is not None:
            env.off_click(self.collapse_tool)
        self.collapse_tool = None
        if self.titlebar is not None:
            self.collapse_tool = _first(env.children_by_class(self.titlebar, self.config.collapse_tool_class))
        if self.collapse_tool is not None:
            env.on_click(self.collapse_tool, self.toggle_collapsed)
        else:
            logger.debug(f"{type(self).__name__} has no collapse tool")

        return node

    def get_mask_container(self) -> Any:
        """Mask the body only, keeping the titlebar usable."""
        node = self._require_node("mask")
        return self.body if self.body is not None else node

    # ------------------------------------------------------------------
    # Collapse state
    # ------------------------------------------------------------------

    def collapse(self) -> None:
        """Collapse this panel by adding ``config.collapsed_class`` to its node."""
        self.environment.add_class(self._require_node("collapse"), self.config.collapsed_class)
        self.dispatch("collapse", self)

    def expand(self) -> None:
        """Expand this panel by removing ``config.collapsed_class`` from its node."""
        self.environment.remove_class(self._require_node("expand"), self.config.collapsed_class)
        self.dispatch("expand", self)

    def is_collapsed(self) -> bool:
        return self.environment.has_class(self._require_node("query"), self.config.collapsed_class)

    @property
    def state(self) -> PanelState:
        return PanelState.COLLAPSED if self.is_collapsed() else PanelState.EXPANDED

    def toggle_collapsed(self) -> None:
        """Expand this panel if it is collapsed, and vice versa."""
        if self.is_collapsed():
            self.expand()
        else:
            self.collapse()


def _first(nodes: list[Any]) -> Optional[Any]:
    return nodes[0] if nodes else None
