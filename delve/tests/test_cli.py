"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main
from ..engine_core.items import Item
from ..engine_core.state import WorldState
from ..persistence import SaveStore
from .conftest import TEST_SEED


class TestConfigCommand:
    """Tests for `delve config`."""

    def test_prints_configuration(self, capsys):
        main(["config"])

        out = capsys.readouterr().out
        assert out.startswith("Delve Configuration:")
        assert "Save path:" in out


class TestShowCommand:
    """Tests for `delve show`."""

    def test_prints_saved_world(self, tmp_path, capsys):
        path = tmp_path / "save.json"
        state = WorldState.new(TEST_SEED)
        state.inventory.insert(Item.WOOD)
        SaveStore(path).save(state)

        main(["show", "--save", str(path), "--width", "20", "--height", "7"])

        out = capsys.readouterr().out
        assert out.startswith("┏" + "━" * 18 + "┓")
        assert "Controls:" in out
        assert f"Seed: {TEST_SEED}" in out
        assert "  - wood x1" in out

    def test_missing_save(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["show", "--save", str(tmp_path / "none.json")])

        assert exc_info.value.code == 1
        assert "No saved game" in capsys.readouterr().out
