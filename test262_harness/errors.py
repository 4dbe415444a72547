from pathlib import Path
from typing import Optional


class HarnessError(Exception):
    """Base class for every failure raised while reading a test262 corpus."""

    def __init__(self, message: str, path: Optional[Path] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class FilesystemError(HarnessError):
    """A test file could not be read or decoded as UTF-8."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"Unable to read {path}: {cause}", path=path, cause=cause)


class TraversalError(HarnessError):
    """Walking the corpus failed; the file list is incomplete."""

    def __init__(self, path: Optional[Path], cause: BaseException):
        super().__init__(f"Unable to walk {path}: {cause}", path=path, cause=cause)


class MetadataMissingError(HarnessError):
    def __init__(self, path: Path):
        super().__init__(f"Unable to extract description for {path}", path=path)


class SchemaError(HarnessError):
    """The metadata block exists but does not decode into a Description."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"Invalid description in {path}: {cause}", path=path, cause=cause)


class PatternCompileError(HarnessError):
    def __init__(self, cause: BaseException):
        super().__init__(f"License pattern failed to compile: {cause}", cause=cause)
