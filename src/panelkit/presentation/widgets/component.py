"""
Component - base class for everything that renders a node.

A component renders its template into a node of the rendering environment,
attaches it to a container and afterwards controls the node's visibility and
busy mask. Lifecycle changes are announced through the component's own
events.
"""

import html
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import BaseModel

from panelkit.domain.events import Observable
from panelkit.domain.exceptions import PreconditionViolation
from panelkit.domain.protocols import RenderEnvironment
from panelkit.logger import get_logger
from panelkit.presentation.template import Template
from panelkit.presentation.widgets.config import ComponentConfig

logger = get_logger("widgets.component")


class Component(Observable):
    """
    A component with a graphical representation.

    States:
        Unrendered until :meth:`render` builds the node, then Rendered with
        independent Shown/Hidden and Unmasked/Masked sub-states.

    Events:
        render(component, node, container): the node was attached by render()
        show(component): the node was shown
        hide(component): the node was hidden

    Subclasses customise the markup by overriding ``template`` and feed it
    extra values through :meth:`render_values`.
    """

    EVENTS = ("render", "show", "hide")

    CONFIG_MODEL: ClassVar[type[ComponentConfig]] = ComponentConfig

    # Position modes in which an absolutely positioned overlay stays inside the node
    OVERLAY_POSITIONING: ClassVar[tuple[str, ...]] = ("absolute", "relative", "fixed")

    template: ClassVar[Template] = Template(
        '<div class="{css_class}">',
        "</div>",
    )

    mask_template: ClassVar[Template] = Template(
        '<div class="{css_class}">',
        '<div class="{message_class}">{message}</div>',
        "</div>",
    )

    def __init__(
        self,
        environment: RenderEnvironment,
        config: Optional[ComponentConfig | Mapping[str, Any]] = None,
        events: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ):
        """
        Initialize the component.

        Args:
            environment: Document model the component renders into
            config: Configuration, as a model or a mapping of its fields
            events: Initial event handlers, see :meth:`Observable.configure`
            options: Individual config fields, overriding ``config``

        Raises:
            pydantic.ValidationError: If an option is unknown or invalid
        """
        if isinstance(config, BaseModel):
            base = config.model_dump(exclude_unset=True)
        else:
            base = dict(config or {})
        self.config = self.CONFIG_MODEL(**{**base, **options})
        self.environment = environment

        self.node: Any = None
        """Node built by the last render(), None until then."""
        self.container: Any = None
        """Container the node was inserted into. Owned by the document."""
        self.rendered = False
        self.mask_node: Any = None
        """Busy overlay, created by the first mask() call."""

        self._setup_done = False

        super().__init__(events)

    @classmethod
    def create(
        cls,
        environment: RenderEnvironment,
        config: Optional[ComponentConfig | Mapping[str, Any]] = None,
        events: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> "Component":
        """Construct a component and run its :meth:`setup` hook."""
        component = cls(environment, config=config, events=events, **options)
        component.setup()
        return component

    def setup(self) -> None:
        """
        Post-construction hook, run once by :meth:`create`.

        Renders the component into ``config.container_selector`` when
        ``config.auto_render`` is set and the selector matches a node.
        Subclasses extending it must call ``super().setup()``.

        Raises:
            PreconditionViolation: If setup already ran
        """
        if self._setup_done:
            raise PreconditionViolation(f"{type(self).__name__}.setup() already ran")
        self._setup_done = True

        if not (self.config.auto_render and self.config.container_selector):
            return

        container = self.environment.query(self.config.container_selector)
        if container is None:
            logger.debug(f"Container '{self.config.container_selector}' not found, skipping auto render")
            return
        self.render(container)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_values(self) -> dict[str, Any]:
        """Extra template values on top of the config fields."""
        return {}

    def template_values(self) -> dict[str, Any]:
        """Value source the templates of this component render against."""
        return {**self.config.model_dump(), **self.render_values()}

    def render(self, container: Any = None) -> Any:
        """
        Build this component's node and insert it into a container.

        Args:
            container: Node to append the component to. Defaults to the node
                matching ``config.container_selector``. Without either, the
                node is left detached for a later :meth:`insert_into`.

        Returns:
            The new node
        """
        target = container
        if target is None and self.config.container_selector:
            target = self.environment.query(self.config.container_selector)

        if self.node is not None:
            logger.warning(f"Re-rendering {type(self).__name__}; the previous node is left where it is")
            self.container = None
            self.rendered = False
            self.mask_node = None

        markup = self.template.render(self.template_values())
        node = self.environment.parse(markup)
        if self.config.css_class:
            self.environment.add_class(node, self.config.css_class)
        self.node = node

        if target is not None:
            self.insert_into(target)
            self.dispatch("render", self, node, target)
        else:
            logger.debug(f"{type(self).__name__} rendered detached")

        return node

    def insert_into(self, container: Any) -> Any:
        """
        Append this component's node to a container.

        Returns:
            The component's node

        Raises:
            PreconditionViolation: If the component was never rendered
        """
        node = self._require_node("insert")
        self.environment.append_child(container, node)
        self.container = container
        self.rendered = True
        return node

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def show(self) -> None:
        """Show this component."""
        self.environment.set_visible(self._require_node("show"), True)
        self.dispatch("show", self)

    def hide(self) -> None:
        """Hide this component."""
        self.environment.set_visible(self._require_node("hide"), False)
        self.dispatch("hide", self)

    def is_visible(self) -> bool:
        return self.environment.is_visible(self._require_node("query"))

    # ------------------------------------------------------------------
    # Busy mask
    # ------------------------------------------------------------------

    def mask(self, message: Optional[str] = None) -> None:
        """
        Show the busy overlay on top of :meth:`get_mask_container`.

        The overlay is built on the first call and reused afterwards; later
        calls only change its message.

        Args:
            message: Text shown on the overlay. Defaults to
                ``config.default_mask_message``.
        """
        self._require_node("mask")
        message = message or self.config.default_mask_message

        if self.mask_node is None:
            self.create_mask(message)
        else:
            self.set_mask_message(message)

        self.environment.set_visible(self.mask_node, True)
        logger.debug(f"{type(self).__name__} masked: {message}")

    def unmask(self) -> None:
        """
        Hide the busy overlay.

        Raises:
            PreconditionViolation: If mask() was never called
        """
        self._require_node("unmask")
        if self.mask_node is None:
            raise PreconditionViolation(f"Cannot unmask {type(self).__name__} before it was masked")
        self.environment.set_visible(self.mask_node, False)

    def is_masked(self) -> bool:
        return self.mask_node is not None and self.environment.is_visible(self.mask_node)

    def get_mask_container(self) -> Any:
        """Node the busy overlay covers. Subclasses may narrow it to a region."""
        return self._require_node("mask")

    def create_mask(self, message: str) -> Any:
        """
        Build the overlay and append it, hidden, to the mask container.

        The container is switched to relative positioning unless it already
        uses a mode the overlay can be positioned in.
        """
        env = self.environment
        mask_container = self.get_mask_container()

        positioning = env.get_style(mask_container, "position") or "static"
        if positioning not in self.OVERLAY_POSITIONING:
            env.set_style(mask_container, "position", "relative")

        markup = self.mask_template.render(
            {
                "css_class": self.config.mask_class,
                "message_class": self.config.mask_message_class,
                "message": html.escape(message, quote=False),
            }
        )
        self.mask_node = env.parse(markup)
        env.set_visible(self.mask_node, False)
        env.append_child(mask_container, self.mask_node)
        return self.mask_node

    def set_mask_message(self, message: str) -> None:
        message_node = self.environment.find_by_class(self.mask_node, self.config.mask_message_class)
        if message_node is not None:
            self.environment.set_text(message_node, message)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_node(self, action: str) -> Any:
        if self.node is None:
            raise PreconditionViolation(f"Cannot {action} {type(self).__name__} before it is rendered")
        return self.node
