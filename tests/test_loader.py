"""Tests for reading project.toml from text and from disk."""

from pathlib import Path

import pytest

from hemtt_config.errors import ConfigIOError, ConfigParseError, ConfigValidationError
from hemtt_config.services.project_loader import (
    _error_position,
    find_project_file,
    load_project_config,
    parse_project_config,
)

FIXTURES = Path(__file__).parent / "fixtures" / "projects"


class TestParseProjectConfig:
    """Parsing text, without semantic validation."""

    def test_parse_minimal(self):
        config = parse_project_config('name = "Test"\nprefix = "tst"\n')
        assert config.name == "Test"
        assert config.prefix == "tst"

    def test_syntax_error(self):
        with pytest.raises(ConfigParseError) as exc_info:
            parse_project_config('name = "Test"\nprefix = \n')
        assert exc_info.value.line == 2
        assert exc_info.value.column is not None

    def test_schema_mismatch(self):
        """Wrong types are parse errors carrying pydantic's diagnostics."""
        with pytest.raises(ConfigParseError) as exc_info:
            parse_project_config('name = "Test"\nprefix = "tst"\nfiles = "mod.cpp"\n')
        assert exc_info.value.errors
        assert exc_info.value.errors[0]["loc"] == ("files",)
        assert "files" in str(exc_info.value)

    def test_missing_name(self):
        with pytest.raises(ConfigParseError):
            parse_project_config('prefix = "tst"\n')

    def test_empty_prefix_is_not_checked(self):
        assert parse_project_config('name = "Test"\nprefix = ""\n').prefix == ""

    def test_python_field_names_are_not_toml_keys(self):
        """Only files and headers fill the bundle list and header table."""
        config = parse_project_config(
            'name = "Test"\nprefix = "tst"\n'
            'declared_files = ["evil.txt"]\nheader_map = { injected = "x" }\n'
        )
        assert config.declared_files == ()
        assert config.headers == {}


class TestErrorPosition:
    """Line and column of TOML syntax errors."""

    def test_attributes_preferred(self):
        error = ValueError("Invalid value (at line 9, column 9)")
        error.lineno, error.colno = 2, 10
        assert _error_position(error) == (2, 10)

    def test_message_fallback(self):
        """Older tomllib only reports the position in the message."""
        assert _error_position(ValueError("Invalid value (at line 3, column 7)")) == (3, 7)

    def test_unknown_position(self):
        assert _error_position(ValueError("Invalid value")) == (None, None)


class TestLoadProjectConfig:
    """Loading and validating files."""

    def test_load_full(self):
        config = load_project_config(FIXTURES / "full.toml")

        assert config.name == "Advanced Banana Environment"
        assert config.prefix == "abe"
        assert config.mainprefix == "z"
        assert config.headers == {"author": "ABE Team", "url": "https://example.com/abe"}
        assert config.declared_files == ("extra/readme.txt", "mod.cpp")
        assert config.version.path == "addons/core/script_version.hpp"
        assert config.version.git_hash == 6
        assert config.version.version_string() == "1.4.2"
        assert config.hemtt.dev.exclude == ["addons/unused/*"]
        assert config.hemtt.release.archive is False
        assert config.hemtt.release.sign is True
        assert config.hemtt.profile("default").dlc == ["Western Sahara"]
        assert config.signing.version == 2
        assert config.signing.authority == "abe_v1"
        assert config.signing.include_git_hash is True

    def test_load_minimal_uses_defaults(self):
        """headers, hemtt and signing omitted → defaults."""
        config = load_project_config(FIXTURES / "minimal.toml")

        assert config.mainprefix is None
        assert config.headers == {}
        assert config.declared_files == ()
        assert config.version.git_hash == 8
        assert config.hemtt.release.sign is True
        assert config.signing.version == 3

    def test_empty_prefix(self):
        with pytest.raises(ConfigValidationError, match="prefix cannot be empty"):
            load_project_config(FIXTURES / "empty_prefix.toml")

    def test_absent_prefix(self, tmp_path):
        path = tmp_path / "project.toml"
        path.write_text('name = "Test"\n', encoding="utf-8")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_project_config(path)
        assert exc_info.value.path == path

    def test_broken_toml(self):
        with pytest.raises(ConfigParseError) as exc_info:
            load_project_config(FIXTURES / "broken.toml")
        assert exc_info.value.path == FIXTURES / "broken.toml"

    def test_nonexistent_file(self):
        with pytest.raises(ConfigIOError) as exc_info:
            load_project_config(Path("nonexistent.toml"))
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "project.toml"
        path.write_bytes(b'name = "\xff\xfe"\nprefix = "tst"\n')
        with pytest.raises(ConfigIOError):
            load_project_config(path)


class TestFindProjectFile:
    """Locating the project file in a project root."""

    def test_hemtt_directory(self, tmp_path):
        (tmp_path / ".hemtt").mkdir()
        (tmp_path / ".hemtt" / "project.toml").write_text("", encoding="utf-8")
        (tmp_path / "hemtt.toml").write_text("", encoding="utf-8")
        assert find_project_file(tmp_path) == tmp_path / ".hemtt" / "project.toml"

    def test_legacy_file(self, tmp_path):
        (tmp_path / "hemtt.toml").write_text("", encoding="utf-8")
        assert find_project_file(tmp_path) == tmp_path / "hemtt.toml"

    def test_not_found(self, tmp_path):
        with pytest.raises(ConfigIOError, match="No project file found"):
            find_project_file(tmp_path)
