"""Loader for project.toml.

Reads the file, parses TOML, checks the shape with pydantic and then runs
the semantic rules. Any failure aborts the whole load.
"""

import logging
import re
import tomllib
from pathlib import Path

from pydantic import ValidationError

from hemtt_config.errors import (
    ConfigIOError,
    ConfigParseError,
    format_validation_errors,
)
from hemtt_config.models.project import ProjectConfig

logger = logging.getLogger(__name__)

# Fallback for Python < 3.14, where TOMLDecodeError has no lineno/colno attributes
_POSITION_RE = re.compile(r"at line (\d+), column (\d+)")

# Searched in order by find_project_file
PROJECT_FILE_CANDIDATES = (
    Path(".hemtt") / "project.toml",
    Path("hemtt.toml"),
)


def parse_project_config(text: str, path: Path | None = None) -> ProjectConfig:
    """Parse TOML text into a ProjectConfig without semantic validation."""
    try:
        raw = tomllib.loads(text)  # TOML → Python dict
    except tomllib.TOMLDecodeError as e:
        line, column = _error_position(e)
        raise ConfigParseError(f"Invalid TOML: {e}", path, line=line, column=column) from e

    try:
        return ProjectConfig.model_validate(raw)  # dict → Pydantic model
    except ValidationError as e:
        errors = e.errors()
        raise ConfigParseError(
            f"Config does not match schema: {format_validation_errors(errors)}",
            path,
            errors=errors,
        ) from e


def load_project_config(path: Path) -> ProjectConfig:
    """Read, parse and validate a project file."""
    logger.debug("Reading project config from %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"Cannot read config file: {e}", path) from e

    config = parse_project_config(text, path).validate_rules(path)
    logger.info("Loaded project %s (prefix %s) from %s", config.name, config.prefix, path)
    return config


def find_project_file(root: Path) -> Path:
    """Locate the project file under ``root``."""
    for candidate in PROJECT_FILE_CANDIDATES:
        path = Path(root) / candidate
        if path.is_file():
            return path
    names = ", ".join(str(c) for c in PROJECT_FILE_CANDIDATES)
    raise ConfigIOError(f"No project file found, looked for {names}", Path(root))


def _error_position(error: tomllib.TOMLDecodeError) -> tuple[int | None, int | None]:
    # the attributes win; the message is only parsed when they are missing
    line = getattr(error, "lineno", None)
    column = getattr(error, "colno", None)
    if line is None:
        match = _POSITION_RE.search(str(error))
        if match:
            line, column = int(match.group(1)), int(match.group(2))
    return line, column
