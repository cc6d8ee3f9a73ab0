"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error handling
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from rescodegen.config.loader import _deep_merge, _load_yaml, load_config
from rescodegen.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the global config at a file that does not exist."""
    global_path = tmp_path / "global" / "config.yaml"
    with patch("rescodegen.config.loader.GLOBAL_CONFIG_PATH", global_path):
        yield global_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "RESCODEGEN__LOGGING__LEVEL",
        "RESCODEGEN__PARSER__MAX_TYPE_DEPTH",
        "RESCODEGEN__PARSER__STRIP_TRAILING_COMMAS",
    ):
        monkeypatch.delenv(key, raising=False)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("parser:\n  max_type_depth: 8\n")

        assert _load_yaml(yaml_file) == {"parser": {"max_type_depth": 8}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_dicts_merge(self) -> None:
        base = {"parser": {"max_type_depth": 8, "strip_trailing_commas": True}}
        override = {"parser": {"max_type_depth": 4}}

        result = _deep_merge(base, override)

        assert result == {"parser": {"max_type_depth": 4, "strip_trailing_commas": True}}

    def test_base_not_mutated(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_files(self, tmp_path: Path) -> None:
        config = load_config(search_dir=tmp_path)

        assert config.parser.max_type_depth == 32
        assert config.logging.level == "WARNING"

    def test_project_yaml_found_in_search_dir(self, tmp_path: Path) -> None:
        (tmp_path / "rescodegen.yaml").write_text("parser:\n  max_type_depth: 10\n")

        config = load_config(search_dir=tmp_path)

        assert config.parser.max_type_depth == 10

    def test_project_overrides_global(self, tmp_path: Path, isolated_global_config: Path) -> None:
        isolated_global_config.parent.mkdir(parents=True)
        isolated_global_config.write_text(
            "parser:\n  max_type_depth: 5\n  strip_trailing_commas: false\n"
        )
        project = tmp_path / "project"
        project.mkdir()
        (project / "rescodegen.yaml").write_text("parser:\n  max_type_depth: 7\n")

        config = load_config(search_dir=project)

        assert config.parser.max_type_depth == 7
        assert config.parser.strip_trailing_commas is False

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "rescodegen.yaml").write_text("logging:\n  level: INFO\n")
        monkeypatch.setenv("RESCODEGEN__LOGGING__LEVEL", "DEBUG")

        config = load_config(search_dir=tmp_path)

        assert config.logging.level == "DEBUG"

    def test_kwargs_override_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RESCODEGEN__PARSER__MAX_TYPE_DEPTH", "9")

        config = load_config(search_dir=tmp_path, parser={"max_type_depth": 3})

        assert config.parser.max_type_depth == 3

    def test_explicit_path_used(self, tmp_path: Path) -> None:
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("parser:\n  strip_trailing_commas: false\n")

        config = load_config(explicit)

        assert config.parser.strip_trailing_commas is False

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / "rescodegen.yaml").write_text("parser:\n  max_type_depth: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(search_dir=tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
