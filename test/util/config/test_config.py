# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import pytest
import yaml

from pydantic import ValidationError

from reflectutil.config import ReflectUtilConfig, configure, load_config, open_config
from reflectutil.util.logging import LoggingLevel


@pytest.mark.config
class TestLoadConfig:
    def test_empty_document_uses_defaults(self):
        config = load_config("")

        assert config == ReflectUtilConfig()
        assert config.logging.rich
        assert config.logging.levels.default == LoggingLevel.INFO

    def test_yaml_string(self):
        config = load_config(
            """
            logging:
              rich: false
              levels:
                tty: warning
                default: debug
            """
        )

        assert not config.logging.rich
        assert config.logging.levels.tty == LoggingLevel.WARNING
        assert config.logging.levels.default == LoggingLevel.DEBUG

    def test_mapping(self):
        config = load_config({"logging": {"levels": {"file": "info"}}})

        assert config.logging.levels.file == LoggingLevel.INFO

    def test_model_is_returned_unchanged(self):
        config = ReflectUtilConfig()

        assert load_config(config) is config

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            load_config({"reflection": {}})

    def test_rejects_non_mapping_documents(self):
        with pytest.raises(TypeError, match="Expected a dictionary, got list"):
            load_config("- one\n- two\n")

    def test_config_is_frozen(self):
        config = load_config({})

        with pytest.raises(ValidationError):
            config.logging = None

    def test_open_config_with_include(self, tmp_path):
        (tmp_path / "levels.yaml").write_text("tty: error\ndefault: warning\n", encoding="UTF-8")
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  levels: !include levels.yaml\n", encoding="UTF-8")

        config = open_config(path)

        assert config.logging.levels.tty == LoggingLevel.ERROR
        assert config.logging.levels.default == LoggingLevel.WARNING

    def test_configure_validates_before_initialising(self):
        with pytest.raises(ValidationError):
            configure({"logging": {"levels": {"default": "loud"}}})

    def test_configure_only_once(self, logging_manager):
        assert logging_manager.initialized

        with pytest.raises(RuntimeError, match="twice"):
            configure({})


@pytest.mark.config
class TestIncludeLoader:
    def test_nested_include_is_relative_to_including_file(self, tmp_path):
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "tty.yaml").write_text("error\n", encoding="UTF-8")
        (nested / "levels.yaml").write_text("tty: !include tty.yaml\n", encoding="UTF-8")
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  levels: !include nested/levels.yaml\n", encoding="UTF-8")

        assert open_config(path).logging.levels.tty == LoggingLevel.ERROR

    def test_absolute_include(self, tmp_path):
        levels = tmp_path / "levels.yaml"
        levels.write_text("default: debug\n", encoding="UTF-8")

        config = load_config(f"logging:\n  levels: !include {levels}\n")

        assert config.logging.levels.default == LoggingLevel.DEBUG

    def test_include_requires_a_path(self):
        with pytest.raises(yaml.constructor.ConstructorError, match="expects a file path"):
            load_config("logging: !include [a, b]\n")
