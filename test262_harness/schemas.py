from pathlib import Path
from typing import Any, FrozenSet, Optional, Tuple
from enum import Enum

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class Phase(str, Enum):
    """When a negative test is expected to fail."""

    parse = "parse"
    early = "early"
    resolution = "resolution"
    runtime = "runtime"


# Older corpus revisions spell a few flags differently
_FLAG_ALIASES = {
    "CanBlockIsFalse": "canBlockIsFalse",
    "CanBlockIsTrue": "canBlockIsTrue",
    "non-deterministic": "nonDeterministic",
}


class Flag(str, Enum):
    """How a test has to be executed."""

    only_strict = "onlyStrict"
    no_strict = "noStrict"
    module = "module"
    # run the source unaltered, non-strict only
    raw = "raw"
    async_ = "async"
    generated = "generated"
    can_block_is_false = "canBlockIsFalse"
    can_block_is_true = "canBlockIsTrue"
    non_deterministic = "nonDeterministic"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Flag"]:
        if isinstance(value, str) and value in _FLAG_ALIASES:
            return cls(_FLAG_ALIASES[value])
        return None


class Negative(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: Phase
    # name of the expected error, e.g. SyntaxError
    kind: Optional[str] = Field(default=None, validation_alias=AliasChoices("kind", "type"))


class Description(BaseModel):
    """The YAML metadata block of a single test file.

    The four identifier fields are alternative ids from different eras of
    the corpus; any number of them (including none) may be present.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = None
    esid: Optional[str] = None
    es5id: Optional[str] = None
    es6id: Optional[str] = None
    info: Optional[str] = None
    description: Optional[str] = None
    negative: Optional[Negative] = None
    includes: FrozenSet[str] = frozenset()
    flags: FrozenSet[Flag] = frozenset()
    locale: FrozenSet[str] = frozenset()
    features: FrozenSet[str] = frozenset()

    @field_validator("includes", "locale", "features", mode="before")
    @classmethod
    def empty_when_null(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("flags", mode="before")
    @classmethod
    def resolve_flag_aliases(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set, frozenset)):
            return [Flag(item) if isinstance(item, str) else item for item in value]
        return value

    @property
    def is_negative(self) -> bool:
        return self.negative is not None

    def has_flag(self, flag: Flag) -> bool:
        return flag in self.flags

    def to_yaml(self) -> str:
        """Encode back into the metadata block format.

        Collections are written sorted and unset fields are left out, so
        parsing the output yields an equal Description.
        """
        data = self.model_dump(mode="json", exclude_none=True)
        for key in ("includes", "flags", "locale", "features"):
            if data[key]:
                data[key] = sorted(data[key])
            else:
                del data[key]
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


class Entry(BaseModel):
    """One test file: the raw source, where it came from and its metadata."""

    model_config = ConfigDict(frozen=True)

    source: str
    path: Path
    desc: Description
    # half-open [start, end) offsets of the license notice in source
    license: Optional[Tuple[int, int]] = None

    @model_validator(mode="after")
    def check_license_range(self):
        if self.license is not None:
            start, end = self.license
            if not 0 <= start <= end <= len(self.source):
                raise ValueError(f"license range {self.license} outside source of length {len(self.source)}")
        return self

    @property
    def license_text(self) -> Optional[str]:
        if self.license is None:
            return None
        start, end = self.license
        return self.source[start:end]
