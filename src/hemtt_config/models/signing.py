"""Models for the ``[signing]`` table of project.toml."""

from typing import Literal

from pydantic import BaseModel


class SigningOptions(BaseModel):
    """Options for signing built PBOs.

    Every key is optional:

        [signing]
        version = 2
        authority = "my_authority"
        include_git_hash = true
    """

    version: Literal[2, 3] = 3
    authority: str | None = None
    include_git_hash: bool = False

    model_config = {"frozen": True}

    def authority_for(self, prefix: str) -> str:
        # keys are named after the prefix unless an authority is configured
        return self.authority or prefix
