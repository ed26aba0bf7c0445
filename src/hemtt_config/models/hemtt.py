"""Models for the ``[hemtt]`` feature table of project.toml.

Example:
    [hemtt.dev]
    exclude = ["addons/unused/*"]

    [hemtt.release]
    archive = false

    [hemtt.launch.default]
    workshop = ["450814997"]
    dlc = ["Western Sahara"]
    parameters = ["-world=empty"]
"""

from pydantic import BaseModel, Field


class DevFeatures(BaseModel):
    """Toggles for ``hemtt dev`` builds."""

    exclude: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class ReleaseFeatures(BaseModel):
    """Toggles for ``hemtt release`` builds."""

    sign: bool = True
    archive: bool = True
    folder: str = "release"

    model_config = {"frozen": True}


class LaunchOptions(BaseModel):
    """One named launch profile."""

    workshop: list[str] = Field(default_factory=list)
    dlc: list[str] = Field(default_factory=list)
    parameters: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class HemttFeatures(BaseModel):
    """Feature toggles controlling build behaviour."""

    dev: DevFeatures = Field(default_factory=DevFeatures)
    release: ReleaseFeatures = Field(default_factory=ReleaseFeatures)
    launch: dict[str, LaunchOptions] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def profile(self, name: str) -> LaunchOptions | None:
        return self.launch.get(name)
