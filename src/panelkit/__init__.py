"""panelkit - a minimal UI component framework.

An event bus, logic-free string templates and a component/panel lifecycle
(render, show/hide, busy masking, collapse/expand) over an injected rendering
environment.
"""

from loguru import logger as _logger

from panelkit.domain.events import NO_SCOPE, Observable
from panelkit.domain.exceptions import PanelkitError, PreconditionViolation
from panelkit.domain.types import PanelState
from panelkit.presentation.environment import SoupEnvironment
from panelkit.presentation.template import Template, TemplateOptions
from panelkit.presentation.widgets import Component, ComponentConfig, Panel, PanelConfig

# Silent until an application calls panelkit.logger.setup_logger()
_logger.disable("panelkit")

__version__ = "0.1.0"

__all__ = [
    "NO_SCOPE",
    "Component",
    "ComponentConfig",
    "Observable",
    "Panel",
    "PanelConfig",
    "PanelState",
    "PanelkitError",
    "PreconditionViolation",
    "SoupEnvironment",
    "Template",
    "TemplateOptions",
]
