"""Models for the ``[version]`` table of project.toml.

Example:
    [version]
    path = "addons/main/script_version.hpp"
    git_hash = 6
"""

from pydantic import BaseModel, Field


class VersionOptions(BaseModel):
    """How the project version is discovered.

    By default the version is read from the macro file at ``path``. Setting
    major/minor/patch in the table overrides the macro file.
    """

    path: str = "addons/main/script_version.hpp"
    git_hash: int = Field(default=8, ge=0)
    major: int | None = Field(default=None, ge=0)
    minor: int | None = Field(default=None, ge=0)
    patch: int | None = Field(default=None, ge=0)
    build: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}

    def version_string(self) -> str | None:
        """Explicit version from the table, or None when it is incomplete."""
        if self.major is None or self.minor is None or self.patch is None:
            return None
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.build is not None:
            version += f".{self.build}"
        return version
