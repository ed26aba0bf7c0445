"""Errors raised while loading project.toml."""

from pathlib import Path


class ConfigError(Exception):
    """Base error for project configuration loading."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class ConfigIOError(ConfigError):
    """The configuration file could not be read."""


class ConfigParseError(ConfigError):
    """The file is not valid TOML or does not match the expected shape.

    line/column come from the TOML decoder, errors from pydantic.
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
        errors: list[dict] | None = None,
    ):
        self.line = line
        self.column = column
        self.errors = errors or []
        super().__init__(message, path)


class ConfigValidationError(ConfigError):
    """The file parsed but breaks a semantic rule."""

    def __init__(self, rule: str, path: Path | None = None):
        self.rule = rule
        super().__init__(rule, path)


def format_validation_errors(errors: list[dict]) -> str:
    """Collapse pydantic errors into ``loc: msg; loc: msg``."""
    return "; ".join(
        f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}"
        for err in errors
    )
