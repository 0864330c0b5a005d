"""
Unit tests for editor_config module.
"""

import json

import pytest

from PE_Libs.ImageEditingLib.filter_engine import FilterOptions
from PE_Libs.SessionLib.editor_config import EditorConfig, load_config, save_config


class TestEditorConfig:
    """Tests for EditorConfig."""

    def test_defaults(self):
        config = EditorConfig()

        assert config.history_capacity == 10
        assert config.clear_redo_on_apply is False
        assert config.boundary_mode == "skip"
        assert config.filter_options() == FilterOptions()

    def test_to_dict_from_dict(self):
        config = EditorConfig(
            history_capacity=4,
            clear_redo_on_apply=True,
            boundary_mode="renormalize",
            saturate_edges=True,
            clamp_contrast_low=True,
        )

        assert EditorConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        config = EditorConfig.from_dict({"history_capacity": 2, "theme": "dark"})

        assert config.history_capacity == 2

    def test_filter_options(self):
        options = EditorConfig(boundary_mode="row_break", clamp_contrast_low=True).filter_options()

        assert options.boundary_mode == "row_break"
        assert options.clamp_contrast_low is True
        assert options.saturate_edges is False

    @pytest.mark.parametrize("kwargs", [
        {"history_capacity": 0},
        {"history_capacity": "3"},
        {"history_capacity": 2.5},
        {"boundary_mode": "wrap"},
        {"saturate_edges": "false"},
        {"clear_redo_on_apply": 1},
        {"clamp_contrast_low": None},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EditorConfig(**kwargs)


class TestConfigFiles:
    """Tests for load_config / save_config."""

    def test_save_and_load(self, tmp_path):
        config = EditorConfig(history_capacity=7, saturate_edges=True)

        path = save_config(config, tmp_path / "editor.json")

        assert json.loads(path.read_text(encoding="utf-8"))["history_capacity"] == 7
        assert load_config(path) == config

    def test_load_rejects_non_object(self, tmp_path):
        path = tmp_path / "editor.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_load_rejects_string_values(self, tmp_path):
        path = tmp_path / "editor.json"
        path.write_text(json.dumps({"history_capacity": "3"}), encoding="utf-8")

        with pytest.raises(ValueError, match="history_capacity"):
            load_config(path)
