"""Shared fixtures for panelkit tests."""

import pytest
from loguru import logger

from panelkit.presentation.environment import SoupEnvironment

PAGE = '<html><head></head><body><div id="app"></div><div id="sidebar"></div></body></html>'


@pytest.fixture
def environment() -> SoupEnvironment:
    """Environment hosting a page with #app and #sidebar containers."""
    return SoupEnvironment(PAGE)


@pytest.fixture
def container(environment):
    return environment.query("#app")


@pytest.fixture
def log_messages():
    """Collect panelkit log records as formatted strings."""
    messages: list[str] = []
    logger.enable("panelkit")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("panelkit")


class Recorder:
    """Callable recording every call's arguments, returning a fixed value."""

    def __init__(self, result=None):
        self.calls: list[tuple] = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


@pytest.fixture
def recorder():
    return Recorder
