"""
Recursive file discovery for the scanner.

Paths are built by joining each directory with the entry name, so they keep
the shape of the root the caller passed in (``./src/main.go`` for a root of
``.``). They are never resolved or made absolute.
"""
from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, List, Union

from ..exceptions import DirectoryListingError, ErrorCode

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def walk(root: PathLike, include: Callable[[str], bool]) -> Iterator[str]:
    """
    Yield every file under ``root`` whose name passes ``include``.

    Files of a directory are yielded before its subdirectories are entered.
    Entries are visited in name order. The filter never prunes directories;
    symlinks to directories are skipped to avoid cycles.

    Args:
        root: Directory to start from
        include: Predicate applied to the bare file name

    Raises:
        DirectoryListingError: If ``root`` or any subdirectory cannot be listed
    """
    directory = os.fspath(root)
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except FileNotFoundError as e:
        raise DirectoryListingError(
            f"Directory not found: {directory}",
            code=ErrorCode.DIRECTORY_NOT_FOUND,
            details={"path": directory},
        ) from e
    except OSError as e:
        raise DirectoryListingError(
            f"Cannot list directory {directory}: {e.strerror or e}",
            details={"path": directory},
        ) from e

    subdirectories: List[str] = []
    for entry in entries:
        path = os.path.join(directory, entry.name)
        if entry.is_dir(follow_symlinks=False):
            subdirectories.append(path)
        elif entry.is_symlink() and entry.is_dir():
            logger.debug("Not following directory symlink %s", path)
        elif include(entry.name):
            yield path

    for subdirectory in subdirectories:
        yield from walk(subdirectory, include)
