"""Root model for project.toml.

This file describes the structure of the file the build reads from
``.hemtt/project.toml``. Pydantic checks that required keys are present and
typed correctly; the semantic rules live in ``validate_rules``.

Full example:
    name = "Advanced Banana Environment"
    prefix = "abe"
    mainprefix = "z"
    files = ["extra/*.txt"]

    [headers]
    author = "ABE Team"

    [version]
    git_hash = 6

    [signing]
    authority = "abe_v1"
"""

from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field

from hemtt_config.errors import ConfigValidationError
from hemtt_config.models.hemtt import HemttFeatures
from hemtt_config.models.signing import SigningOptions
from hemtt_config.models.version import VersionOptions
from hemtt_config.services.file_resolver import resolve_root_files


class ProjectConfig(BaseModel):
    """Parsed project configuration.

    prefix defaults to "" so that a missing prefix is reported by
    validate_rules rather than as a schema error.
    """

    name: str
    prefix: str = ""
    mainprefix: str | None = None
    version: VersionOptions = Field(default_factory=VersionOptions)
    # read through the headers property
    header_map: dict[str, str] = Field(default_factory=dict, alias="headers")
    # files() is the resolved list, so the configured one keeps a Python-side name
    declared_files: tuple[str, ...] = Field(default_factory=tuple, alias="files")
    hemtt: HemttFeatures = Field(default_factory=HemttFeatures)
    signing: SigningOptions = Field(default_factory=SigningOptions)

    # TOML keys only: declared_files = [...] in a document is an unknown key
    model_config = {"frozen": True}

    @property
    def headers(self) -> Mapping[str, str]:
        """Headers added to built PBOs, read-only."""
        return MappingProxyType(self.header_map)

    def validate_rules(self, path: Path | None = None) -> "ProjectConfig":
        if not self.prefix:
            raise ConfigValidationError("prefix cannot be empty", path)
        return self

    def files(self, exists: Callable[[Path], bool] = Path.exists) -> list[str]:
        """Files to copy into the root of the built mod.

        Declared entries plus any default root files found in the working
        directory, sorted and without duplicates. Not cached: call again
        after the filesystem changes.
        """
        return resolve_root_files(self.declared_files, exists=exists)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
