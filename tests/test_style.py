"""Tests for style resolution."""

from modgraph.config import GraphConfig
from modgraph.style import dot_value, node_highlight, resolve_styles


class TestResolveStyles:
    """Tests for resolve_styles function."""

    def test_defaults(self):
        """Built-in defaults are derived from the config fields."""
        styles = resolve_styles(GraphConfig())

        assert styles.graph == {
            "overlap": "false",
            "pad": "0.3",
            "rankdir": "LR",
            "layout": "dot",
            "bgcolor": "#111111",
        }
        assert styles.edge == {"color": "#757575"}
        assert styles.node == {
            "fontname": "Arial",
            "fontsize": "14px",
            "color": "#c6c5fe",
            "shape": "box",
            "style": "rounded",
            "height": "0",
            "fontcolor": "#c6c5fe",
        }

    def test_overrides_win(self):
        """graphviz_options replace defaults for the same key and add new ones."""
        config = GraphConfig(
            graphviz_options={
                "G": {"rankdir": "TB", "splines": "ortho"},
                "E": {"color": "red", "arrowsize": 0.5},
                "N": {"shape": "ellipse", "fontcolor": "white"},
            }
        )

        styles = resolve_styles(config)

        assert styles.graph["rankdir"] == "TB"
        assert styles.graph["splines"] == "ortho"
        assert styles.graph["bgcolor"] == "#111111"
        assert styles.edge == {"color": "red", "arrowsize": "0.5"}
        assert styles.node["shape"] == "ellipse"
        assert styles.node["fontcolor"] == "white"
        assert styles.node["color"] == "#c6c5fe"

    def test_unset_values_dropped(self):
        """Options set to None are left out of the attribute sets."""
        styles = resolve_styles(GraphConfig(background_color=None))

        assert "bgcolor" not in styles.graph

    def test_config_not_modified(self):
        """Resolving styles has no side effects on the config."""
        options = {"G": {"rankdir": "TB"}}
        config = GraphConfig(graphviz_options=options)

        resolve_styles(config)

        assert options == {"G": {"rankdir": "TB"}}
        assert config.rankdir == "LR"


class TestDotValue:
    """Tests for dot_value function."""

    def test_booleans(self):
        assert dot_value(True) == "true"
        assert dot_value(False) == "false"

    def test_numbers_and_strings(self):
        assert dot_value(0.3) == "0.3"
        assert dot_value("box") == "box"


class TestNodeHighlight:
    """Tests for the node style precedence rules."""

    def test_no_dependencies(self):
        """Empty list and unknown module both get the no-dependency color."""
        config = GraphConfig()

        assert node_highlight([], False, config) == config.no_dependency_color
        assert node_highlight(None, False, config) == config.no_dependency_color

    def test_no_dependencies_before_cyclic(self):
        """The no-dependency rule is checked before the cyclic rule."""
        config = GraphConfig()

        assert node_highlight([], True, config) == config.no_dependency_color

    def test_cyclic(self):
        """A module with dependencies in a cycle gets the cyclic color."""
        config = GraphConfig()

        assert node_highlight(["B"], True, config) == config.cyclic_node_color

    def test_default(self):
        """Otherwise no highlight is applied."""
        assert node_highlight(["B"], False, GraphConfig()) is None

    def test_custom_colors(self):
        config = GraphConfig(no_dependency_color="green", cyclic_node_color="red")

        assert node_highlight([], False, config) == "green"
        assert node_highlight(["B"], True, config) == "red"
