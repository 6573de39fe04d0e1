"""
Change source for a plain directory.

There is no history to query, so the source remembers the result of the
previous scan and compares each new scan against it:

    absent -> True (found) -> True (still there) -> False (gone) -> absent

A deletion is reported by exactly one query and then forgotten. A file that
vanishes and comes back is reported as a new file.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

from loguru import logger

from .models import ChangesMap
from .providers import FileLister, FindLister


def next_state(tracked: Dict[str, bool], found: Iterable[str]) -> Dict[str, bool]:
    """
    Compute the tracked state after a scan, without touching `tracked`.

    Entries already marked deleted are dropped, remaining entries are marked
    deleted unless they were found again, and every found path is active.
    """
    state = {path: False for path, active in tracked.items() if active}
    for path in found:
        state[path] = True
    return state


class FileChangeSource:
    """
    Tracks file additions and deletions under a directory between calls.

    Usage:
        source = open_file_source("/path/to/dir")
        first = await source.query()    # every file, all True
        later = await source.query()    # new files True, removed files False
    """

    def __init__(self, path: str | Path, lister: Optional[FileLister] = None):
        self.path = Path(path)
        self.lister = lister or FindLister(self.path)
        self._tracked: Dict[str, bool] = {}

    @property
    def tracked(self) -> ChangesMap:
        """Snapshot of the state left by the last successful query."""
        return ChangesMap(self._tracked)

    async def query(self) -> ChangesMap:
        """Scan the directory and return changes since the previous scan."""
        # The listing may fail; state is only replaced once it succeeded.
        # Nothing suspends between reading and replacing _tracked, so
        # overlapping queries each apply a whole scan in turn.
        found = await self.lister.list_files()
        state = next_state(self._tracked, found)
        self._tracked = state

        changes = ChangesMap(state)
        logger.debug(
            f"{self.path}: {len(changes.active())} active, "
            f"{len(changes.deleted())} deleted"
        )
        return changes

    __call__ = query

    def __repr__(self) -> str:
        return f"FileChangeSource({str(self.path)!r})"


def open_file_source(path: str | Path, lister: Optional[FileLister] = None) -> FileChangeSource:
    """Open a change source on a filesystem directory."""
    return FileChangeSource(path, lister=lister)
