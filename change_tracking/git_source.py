"""
Change source for a git repository.

Changes are read from the repository's history on every query, so the
source keeps no state between calls:
- without a reference commit, every file in the branch's tree is listed
  as active;
- with a reference commit, the name-status diff between that commit and
  the branch is reported (renames become a deletion plus an addition).
"""

from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from .filenames import normalize_git_path
from .models import ChangesMap, DiffEntry
from .providers import GitCli, GitProvider


class GitChangeSource:
    """
    Reports file changes on one branch of a git repository.

    Usage:
        source = open_git_source("/path/to/repo", "main")
        everything = await source.query()
        changes = await source.query("4f2c9e1")
    """

    def __init__(
        self,
        path: str | Path,
        branch: str,
        provider: Optional[GitProvider] = None
    ):
        self.path = Path(path)
        self.branch = branch
        self.provider = provider or GitCli(self.path)

    async def changes_since(self, since: str) -> ChangesMap:
        """Changes between the `since` commit and the branch head."""
        lines = await self.provider.diff_name_status(since, self.branch)

        changes: Dict[str, bool] = {}
        for line in lines:
            if not line:
                continue
            changes.update(DiffEntry.parse(line).changes())

        logger.debug(f"{self.path}: {len(changes)} changes on {self.branch} since {since}")
        return ChangesMap(changes)

    async def list_active(self) -> ChangesMap:
        """Every file currently in the branch's tree, marked active."""
        lines = await self.provider.list_tree(self.branch)
        changes = {normalize_git_path(line): True for line in lines if line}

        logger.debug(f"{self.path}: {len(changes)} files on {self.branch}")
        return ChangesMap(changes)

    async def query(self, since: Optional[str] = None) -> ChangesMap:
        """
        Return changes on the branch.

        Args:
            since: Optional reference commit; when omitted all files are listed
        """
        if since:
            return await self.changes_since(since)
        return await self.list_active()

    __call__ = query

    def __repr__(self) -> str:
        return f"GitChangeSource({str(self.path)!r}, {self.branch!r})"


def open_git_source(
    path: str | Path,
    branch: str,
    provider: Optional[GitProvider] = None
) -> GitChangeSource:
    """Open a change source on a git repository root."""
    return GitChangeSource(path, branch, provider=provider)
