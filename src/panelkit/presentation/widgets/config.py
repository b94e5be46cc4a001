"""Configuration models for components.

Every option a component understands is a named field here. Unknown options
are rejected when the component is constructed.
"""

from pydantic import BaseModel, ConfigDict, Field


class ComponentConfig(BaseModel):
    """Options shared by all components."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    container_selector: str = Field(
        default="", description="CSS selector of the container used when render() gets no container"
    )
    css_class: str = Field(default="", description="CSS class added to the component's node")
    mask_class: str = Field(default="mask", description="CSS class of the busy overlay")
    mask_message_class: str = Field(default="message", description="CSS class of the overlay's message")
    default_mask_message: str = Field(default="Loading...", description="Message shown when mask() gets none")
    auto_render: bool = Field(
        default=False, description="Render into container_selector from setup(), if the selector resolves"
    )


class PanelConfig(ComponentConfig):
    """Options of a collapsible panel."""

    css_class: str = Field(default="panel", description="CSS class added to the panel's node")
    title: str = Field(default="Panel", description="Text shown in the titlebar")
    collapsed_class: str = Field(default="collapsed", description="Marker class present while collapsed")
    titlebar_class: str = Field(default="titlebar", description="CSS class of the titlebar region")
    body_class: str = Field(default="body", description="CSS class of the body region")
    collapse_tool_class: str = Field(default="collapse-tool", description="CSS class of the collapse toggle")
    collapse_tooltip: str = Field(
        default="Collapse or expand this panel", description="Tooltip of the collapse toggle"
    )
