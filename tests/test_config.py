"""Tests for GraphConfig and load_config()."""

import logging

import pytest

from simplegraph import ConfigError, Graph, GraphConfig, load_config
from simplegraph.config import find_pyproject


class TestGraphConfig:
    """Test GraphConfig validation."""

    def test_defaults(self):
        """Insertion order is the default."""
        assert GraphConfig().vertex_order == "insertion"

    @pytest.mark.parametrize("order", ["insertion", "sorted"])
    def test_known_orders(self, order):
        """Both orders are accepted."""
        assert GraphConfig(vertex_order=order).vertex_order == order

    def test_unknown_order_rejected(self):
        """Anything else raises ConfigError."""
        with pytest.raises(ConfigError, match="Unknown vertex_order"):
            GraphConfig(vertex_order="random")

    def test_frozen(self):
        """Configs are immutable."""
        config = GraphConfig()

        with pytest.raises(AttributeError):
            config.vertex_order = "sorted"


class TestFindPyproject:
    """Test find_pyproject() directory walk."""

    def test_finds_in_parent(self, tmp_path):
        """The nearest pyproject.toml above start is found."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()

    def test_nearest_wins(self, tmp_path):
        """A closer pyproject.toml shadows one further up."""
        (tmp_path / "pyproject.toml").write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text("")

        assert find_pyproject(inner) == (inner / "pyproject.toml").resolve()


class TestLoadConfig:
    """Test load_config() from [tool.simplegraph]."""

    def test_reads_section(self, tmp_path):
        """vertex_order is read from the table."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.simplegraph]\nvertex_order = "sorted"\n'
        )

        config = load_config(tmp_path)

        assert config == GraphConfig(vertex_order="sorted")

    def test_missing_section_gives_defaults(self, tmp_path):
        """A pyproject.toml without the table yields defaults."""
        (tmp_path / "pyproject.toml").write_text("[tool.other]\nx = 1\n")

        assert load_config(tmp_path) == GraphConfig()

    def test_no_pyproject_gives_defaults(self, tmp_path, monkeypatch):
        """No pyproject.toml anywhere yields defaults."""
        monkeypatch.setattr("simplegraph.config.find_pyproject", lambda start=None: None)

        assert load_config(tmp_path) == GraphConfig()

    def test_unknown_key_rejected(self, tmp_path):
        """Typos in the table are reported."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.simplegraph]\nvertex_ordr = "sorted"\n'
        )

        with pytest.raises(ConfigError, match="vertex_ordr"):
            load_config(tmp_path)

    def test_bad_value_rejected(self, tmp_path):
        """An unknown order in the file raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.simplegraph]\nvertex_order = "shuffled"\n'
        )

        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_non_table_rejected(self, tmp_path):
        """tool.simplegraph must be a table."""
        (tmp_path / "pyproject.toml").write_text('[tool]\nsimplegraph = "sorted"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(tmp_path)

    def test_loaded_config_drives_graph(self, tmp_path):
        """A graph built with the loaded config uses its order."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.simplegraph]\nvertex_order = "sorted"\n'
        )
        g = Graph.from_edges([(3, 1), (2, 0)], config=load_config(tmp_path))

        assert list(g.vertices()) == [0, 1, 2, 3]

    def test_logs_source_file(self, tmp_path, caplog):
        """The file a config came from is logged at debug level."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.simplegraph]\nvertex_order = "insertion"\n'
        )

        with caplog.at_level(logging.DEBUG, logger="simplegraph"):
            load_config(tmp_path)

        assert "Loaded graph config from" in caplog.text
