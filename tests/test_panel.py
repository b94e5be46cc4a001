"""Unit tests for Panel."""

import pytest

from panelkit.domain.exceptions import PreconditionViolation
from panelkit.domain.types import PanelState
from panelkit.presentation.template import Template
from panelkit.presentation.widgets import Panel, PanelConfig


@pytest.fixture
def panel(environment, container):
    panel = Panel(environment, title="Layers")
    panel.render(container)
    return panel


class TestRender:
    """Tests for the two-region layout."""

    def test_default_config(self, environment):
        panel = Panel(environment)
        assert panel.config == PanelConfig()
        assert panel.config.css_class == "panel"
        assert panel.event_types() == ("render", "show", "hide", "collapse", "expand")

    def test_regions_located_after_render(self, panel, container):
        node = panel.node

        assert node.parent is container
        assert node["class"] == ["panel"]
        assert panel.titlebar.parent is node
        assert panel.body.parent is node
        assert panel.titlebar["class"] == ["titlebar"]
        assert panel.body["class"] == ["body"]

    def test_titlebar_content(self, panel):
        assert panel.titlebar.find("h3").get_text() == "Layers"
        assert panel.collapse_tool["class"] == ["collapse-tool"]
        assert panel.collapse_tool["title"] == "Collapse or expand this panel"

    def test_custom_region_classes(self, environment, container):
        panel = Panel(environment, titlebar_class="head", body_class="content", collapse_tool_class="toggle")
        panel.render(container)

        assert panel.titlebar["class"] == ["head"]
        assert panel.body["class"] == ["content"]
        assert panel.collapse_tool["class"] == ["toggle"]

    def test_subclass_body_template(self, environment, container):
        """Test subclasses fill the body from their own values."""

        class LayerList(Panel):
            body_template = Template('<ul class="{body_class}">{items}</ul>')

            def render_values(self):
                return {**super().render_values(), "items": "<li>Roads</li><li>Rivers</li>"}

        panel = LayerList(environment, title="Layers")
        panel.render(container)

        assert panel.body.name == "ul"
        assert [li.get_text() for li in panel.body.find_all("li")] == ["Roads", "Rivers"]

    def test_render_event(self, environment, container, recorder):
        on_render = recorder()
        panel = Panel(environment, events={"render": on_render})
        node = panel.render(container)
        assert on_render.calls == [(panel, node, container)]


class TestCollapse:
    """Tests for the collapsed/expanded state machine."""

    def test_initially_expanded(self, panel):
        assert panel.is_collapsed() is False
        assert panel.state is PanelState.EXPANDED

    def test_collapse_and_expand(self, panel):
        panel.collapse()
        assert panel.is_collapsed() is True
        assert panel.state is PanelState.COLLAPSED
        assert panel.node["class"] == ["panel", "collapsed"]

        panel.expand()
        assert panel.is_collapsed() is False
        assert panel.node["class"] == ["panel"]

    def test_toggle_flips_between_two_states(self, panel):
        states = []
        for _ in range(4):
            panel.toggle_collapsed()
            states.append(panel.state)

        assert states == [PanelState.COLLAPSED, PanelState.EXPANDED] * 2

    def test_events_carry_panel(self, environment, container, recorder):
        on_collapse, on_expand = recorder(), recorder()
        panel = Panel(environment, events={"collapse": on_collapse, "expand": on_expand})
        panel.render(container)

        panel.toggle_collapsed()
        panel.toggle_collapsed()

        assert on_collapse.calls == [(panel,)]
        assert on_expand.calls == [(panel,)]

    def test_repeated_collapse_stays_collapsed(self, panel):
        panel.collapse()
        panel.collapse()
        assert panel.node["class"] == ["panel", "collapsed"]

        panel.expand()
        assert panel.is_collapsed() is False

    def test_click_on_collapse_tool_toggles(self, environment, panel):
        environment.click(panel.collapse_tool)
        assert panel.is_collapsed() is True

        environment.click(panel.collapse_tool)
        assert panel.is_collapsed() is False

    def test_click_elsewhere_does_nothing(self, environment, panel):
        environment.click(panel.titlebar.find("h3"))
        environment.click(panel.body)
        assert panel.is_collapsed() is False

    def test_rerender_unwires_previous_collapse_tool(self, environment, panel, container):
        """Test the old node's collapse tool no longer toggles the panel."""
        old_tool = panel.collapse_tool
        panel.render(container)

        environment.click(old_tool)
        assert panel.is_collapsed() is False

        environment.click(panel.collapse_tool)
        assert panel.is_collapsed() is True

    def test_custom_collapsed_class(self, environment, container):
        panel = Panel(environment, collapsed_class="folded")
        panel.render(container)
        panel.collapse()
        assert environment.has_class(panel.node, "folded")

    @pytest.mark.parametrize("method", ["collapse", "expand", "is_collapsed", "toggle_collapsed"])
    def test_requires_render(self, environment, method):
        with pytest.raises(PreconditionViolation):
            getattr(Panel(environment), method)()


class TestMask:
    """Tests for masking a panel."""

    def test_mask_covers_body_only(self, environment, panel):
        panel.mask("Loading layers...")

        assert panel.get_mask_container() is panel.body
        assert panel.mask_node.parent is panel.body
        assert environment.find_by_class(panel.titlebar, "mask") is None
        assert environment.get_style(panel.body, "position") == "relative"
        assert environment.get_style(panel.node, "position") is None

    def test_mask_survives_collapse(self, panel):
        panel.mask()
        panel.collapse()
        panel.unmask()
        panel.expand()
        assert panel.is_masked() is False
        assert panel.mask_node.parent is panel.body

    def test_mask_before_render(self, environment):
        with pytest.raises(PreconditionViolation):
            Panel(environment).mask()
