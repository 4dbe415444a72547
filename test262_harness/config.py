import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


def default_root() -> Path:
    return Path(os.getcwd()) / "test262"


class HarnessConfig(BaseModel):
    root: Path = Field(default_factory=default_root)
    extension: str = ".js"
    fixture_suffix: str = "_FIXTURE"
    sort_paths: bool = True

    @field_validator("extension")
    @classmethod
    def leading_dot(cls, value: str) -> str:
        return value if value.startswith(".") else "." + value

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        """Build a config from TEST262_* environment variables.

        Empty variables are treated as unset.
        """
        return cls(
            root=Path(os.getenv("TEST262_ROOT") or default_root()),
            extension=os.getenv("TEST262_EXTENSION") or ".js",
            fixture_suffix=os.getenv("TEST262_FIXTURE_SUFFIX") or "_FIXTURE",
            sort_paths=os.getenv("TEST262_SORT_PATHS") or "true",
        )
