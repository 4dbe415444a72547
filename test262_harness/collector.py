import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from .config import HarnessConfig
from .errors import TraversalError

logger = logging.getLogger(__name__)


def iter_test_files(root: Path, config: Optional[HarnessConfig] = None) -> Iterator[Path]:
    """Yield every test file under root, skipping fixtures and other file types.

    Any error reported while walking aborts the walk with a TraversalError.
    """
    config = config or HarnessConfig()
    root = Path(root)

    def _abort(err: OSError) -> None:
        raise TraversalError(Path(err.filename) if err.filename else root, err) from err

    for dirpath, dirnames, filenames in os.walk(root, onerror=_abort):
        if config.sort_paths:
            dirnames.sort()
            filenames = sorted(filenames)
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix != config.extension or path.stem.endswith(config.fixture_suffix):
                continue
            # dangling symlinks show up as plain files
            try:
                path.stat()
            except OSError as e:
                raise TraversalError(path, e) from e
            yield path


def collect_test_files(root: Path, config: Optional[HarnessConfig] = None) -> List[Path]:
    paths = list(iter_test_files(root, config))
    logger.info("Collected %s test files under %s", len(paths), root)
    return paths
