import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .collector import collect_test_files
from .config import HarnessConfig
from .errors import HarnessError
from .parser import MetadataParser
from .schemas import Entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarnessResult:
    """Outcome of extracting one test file: either an entry or an error."""

    path: Path
    entry: Optional[Entry] = None
    error: Optional[HarnessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Entry:
        if self.error is not None:
            raise self.error
        return self.entry


class Harness:
    """Single-pass iterator over the tests of a test262 checkout.

    The file list is collected when the harness is created; each file is
    only read and parsed when its result is pulled. A failure in one file
    is returned as an error result and iteration carries on. Once
    exhausted, create a new Harness to walk the corpus again.

        for result in Harness("test262/test"):
            entry = result.unwrap()
            ...
    """

    def __init__(self, root: Optional[Union[str, Path]] = None, config: Optional[HarnessConfig] = None):
        self.config = config or HarnessConfig.from_env()
        self.root = Path(root) if root is not None else self.config.root
        self._paths = collect_test_files(self.root, self.config)
        self._idx = 0

    def __iter__(self) -> "Harness":
        return self

    def __next__(self) -> HarnessResult:
        if self._idx >= len(self._paths):
            raise StopIteration
        path = self._paths[self._idx]
        self._idx += 1
        return self._extract(path)

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> Tuple[Path, ...]:
        return tuple(self._paths)

    def entries(self) -> Iterator[Entry]:
        """Yield entries until the first failing file, whose error is raised."""
        for result in self:
            yield result.unwrap()

    @staticmethod
    def _extract(path: Path) -> HarnessResult:
        try:
            entry = MetadataParser.parse_file(path)
        except HarnessError as e:
            logger.warning("Failed extracting %s: %s", path, e)
            return HarnessResult(path=path, error=e)
        logger.debug("Extracted %s", path)
        return HarnessResult(path=path, entry=entry)
