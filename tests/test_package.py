"""Tests for the package's public surface."""

import panelkit


def test_import_exposes_public_api():
    """Test importing the package works and re-exports the components."""
    assert panelkit.Panel is panelkit.presentation.widgets.Panel
    assert panelkit.Component.EVENTS == ("render", "show", "hide")
    assert callable(panelkit.logger.setup_logger)
