"""
Tests for AssessConfig and config file loading.
"""

import json
import logging

import pytest

from assess_toolkit.config import MISSING_QUESTION_HTML, AssessConfig, ConfigError, load_config


class TestAssessConfig:

    def test_init_when_defaults_then_valid(self):
        config = AssessConfig()
        assert config.default_show_hints == 3
        assert config.file_url("a/b.pdf") == "/filestore/a/b.pdf"

    def test_init_when_negative_hints_then_raises_error(self):
        with pytest.raises(ValueError, match="default_show_hints must be non-negative"):
            AssessConfig(default_show_hints=-2)

    def test_init_when_empty_base_url_then_raises_error(self):
        with pytest.raises(ValueError, match="file_base_url"):
            AssessConfig(file_base_url="")

    def test_file_url_when_spaces_then_quoted(self):
        assert AssessConfig().file_url("my file.png") == "/filestore/my%20file.png"


class TestLoadConfig:

    def test_load_when_valid_file_then_values_read(self, tmp_path):
        path = tmp_path / "assess.json"
        path.write_text(json.dumps({"default_show_hints": 1, "asset_root": "/static"}), encoding="utf-8")

        config = load_config(path)

        assert config.default_show_hints == 1
        assert config.asset_root == "/static"

    def test_load_when_unknown_keys_then_warned_and_ignored(self, tmp_path, caplog):
        path = tmp_path / "assess.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_config(path)

        assert config == AssessConfig()
        assert "theme" in caplog.text

    def test_load_when_missing_then_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.json")

    def test_load_when_not_object_then_config_error(self, tmp_path):
        path = tmp_path / "assess.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(path)

    def test_default_placeholder_when_unset_then_shared_with_renderer(self):
        from assess_toolkit.rendering.pipeline import MISSING_QUESTION_HTML as rendering_placeholder

        assert AssessConfig().missing_question_html == MISSING_QUESTION_HTML
        assert rendering_placeholder is MISSING_QUESTION_HTML
