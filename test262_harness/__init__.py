from .schemas import Description, Entry, Flag, Negative, Phase
from .parser import MetadataParser
from .collector import iter_test_files, collect_test_files
from .config import HarnessConfig
from .harness import Harness, HarnessResult
from .errors import (
    FilesystemError,
    HarnessError,
    MetadataMissingError,
    PatternCompileError,
    SchemaError,
    TraversalError,
)

__all__ = [
    "Description",
    "Entry",
    "Flag",
    "Negative",
    "Phase",
    "MetadataParser",
    "iter_test_files",
    "collect_test_files",
    "HarnessConfig",
    "Harness",
    "HarnessResult",
    "FilesystemError",
    "HarnessError",
    "MetadataMissingError",
    "PatternCompileError",
    "SchemaError",
    "TraversalError",
]
