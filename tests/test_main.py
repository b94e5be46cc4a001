"""Tests for the panelkit command line."""

import pytest
from bs4 import BeautifulSoup
from loguru import logger
from typer.testing import CliRunner

from panelkit.main import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The commands install their own sinks; drop them after each test."""
    yield
    logger.remove()
    logger.disable("panelkit")


def _page(output: str) -> BeautifulSoup:
    return BeautifulSoup(output, "html.parser")


class TestDemo:
    """Tests for the demo command."""

    def test_renders_panel_into_app(self):
        result = runner.invoke(cli, ["demo", "--plain", "--title", "Layers"])

        assert result.exit_code == 0, result.output
        page = _page(result.output)
        panel = page.select_one("#app > .panel")
        assert panel is not None
        assert panel.select_one(".titlebar h3").get_text() == "Layers"

    def test_collapsed_and_masked(self):
        result = runner.invoke(cli, ["demo", "--plain", "--collapsed", "--mask", "Loading layers..."])

        assert result.exit_code == 0, result.output
        panel = _page(result.output).select_one(".panel")
        assert "collapsed" in panel["class"]
        assert panel.select_one(".body > .mask .message").get_text() == "Loading layers..."


class TestTemplate:
    """Tests for the template command."""

    def test_substitutes_values(self):
        result = runner.invoke(cli, ["template", "--plain", "<a>{x}</a>{x}{missing}", "x=Z"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "<a>Z</a>Z"

    def test_rejects_malformed_pair(self):
        result = runner.invoke(cli, ["template", "--plain", "{x}", "x"])
        assert result.exit_code != 0
