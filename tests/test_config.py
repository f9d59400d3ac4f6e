"""Tests for configuration merging, validation and loading."""

import tomllib

import pytest

from termkit.config import DiagnosticsConfig, LoggerConfig, PasswordPromptConfig


class TestLoggerConfig:

    def test_defaults(self):
        config = LoggerConfig.merge()
        assert config == LoggerConfig(level=0, format="%s", new_line=True)

    def test_partial_options_keep_other_defaults(self):
        config = LoggerConfig.merge({"level": 2})
        assert config.level == 2
        assert config.format == "%s"
        assert config.new_line is True

    def test_camel_case_new_line_alias(self):
        assert LoggerConfig.merge({"newLine": False}).new_line is False

    def test_existing_config_is_returned_as_is(self):
        config = LoggerConfig(level=1, format="x: %s")
        assert LoggerConfig.merge(config) is config

    def test_unknown_option_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown logger option"):
            LoggerConfig.merge({"colour": "red"})

    @pytest.mark.parametrize("level", [-1, 4, 5, True, "1", 1.0, None])
    def test_invalid_level_is_rejected(self, level):
        with pytest.raises(ValueError, match="Invalid logging level"):
            LoggerConfig.merge({"level": level})

    def test_non_string_format_is_rejected(self):
        with pytest.raises(ValueError, match="format must be a string"):
            LoggerConfig(format=42)

    def test_from_toml(self, tmp_path):
        path = tmp_path / "termkit.toml"
        path.write_text('[logger]\nlevel = 1\nformat = "app: %s"\nnew_line = false\n')

        config = LoggerConfig.from_toml(path)

        assert config == LoggerConfig(level=1, format="app: %s", new_line=False)

    def test_from_toml_without_logger_table_uses_defaults(self, tmp_path):
        path = tmp_path / "termkit.toml"
        path.write_text("[other]\nkey = 1\n")

        assert LoggerConfig.from_toml(path) == LoggerConfig()

    def test_from_toml_invalid_level(self, tmp_path):
        path = tmp_path / "termkit.toml"
        path.write_text("[logger]\nlevel = 7\n")

        with pytest.raises(ValueError, match="Invalid value in configuration file"):
            LoggerConfig.from_toml(path)

    def test_from_toml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            LoggerConfig.from_toml(tmp_path / "missing.toml")

    def test_from_toml_malformed_file(self, tmp_path):
        path = tmp_path / "termkit.toml"
        path.write_text("[logger\nlevel = \n")

        with pytest.raises(tomllib.TOMLDecodeError):
            LoggerConfig.from_toml(path)


class TestPasswordPromptConfig:

    def test_defaults(self):
        config = PasswordPromptConfig.merge()
        assert config.ast == "*"
        assert config.color == "grey"
        assert config.color_code == 8

    def test_merge_over_defaults(self):
        config = PasswordPromptConfig.merge({"color": "cyan"})
        assert config.ast == "*"
        assert config.color_code == 14

    def test_ast_false_disables_mask(self):
        assert PasswordPromptConfig.merge({"ast": False}).ast is False

    @pytest.mark.parametrize("ast", [True, None, 1])
    def test_invalid_ast(self, ast):
        with pytest.raises(ValueError, match="ast must be a string or False"):
            PasswordPromptConfig(ast=ast)

    def test_invalid_color(self):
        with pytest.raises(ValueError, match="Invalid prompt color"):
            PasswordPromptConfig(color="magenta")

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown password prompt option"):
            PasswordPromptConfig.merge({"mask": "#"})


class TestDiagnosticsConfig:

    def test_from_env_defaults(self):
        config = DiagnosticsConfig.from_env({})
        assert config == DiagnosticsConfig(level="WARNING", colors=True)

    def test_from_env_level_is_case_insensitive(self):
        assert DiagnosticsConfig.from_env({"TERMKIT_LOG_LEVEL": " debug "}).level == "DEBUG"

    @pytest.mark.parametrize(
        "environ",
        [{"TERMKIT_LOG_COLORS": "off"}, {"TERMKIT_LOG_COLORS": "0"}, {"NO_COLOR": ""}],
    )
    def test_from_env_colors_off(self, environ):
        assert DiagnosticsConfig.from_env(environ).colors is False

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid diagnostics level"):
            DiagnosticsConfig.from_env({"TERMKIT_LOG_LEVEL": "verbose"})
