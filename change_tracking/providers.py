"""
Providers of raw listing/diff output for the change sources.

The change sources only depend on the two protocols below, so their parsing
and state handling can be exercised against fakes without spawning
processes.
"""

import os
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Protocol, Sequence

from . import commands
from .config import settings

Runner = Callable[..., Awaitable[List[str]]]


class GitProvider(Protocol):
    async def diff_name_status(self, since: str, branch: str) -> List[str]:
        """Lines of `git diff --name-status <since> <branch>`"""
        ...

    async def list_tree(self, branch: str) -> List[str]:
        """Lines of `git ls-tree -r --name-only --full-tree <branch>`"""
        ...


class FileLister(Protocol):
    async def list_files(self) -> List[str]:
        """Paths of every regular file below the root, relative to the root"""
        ...


class GitCli:
    """GitProvider backed by the git command line."""

    def __init__(
        self,
        root: str | Path,
        git_binary: Optional[str] = None,
        runner: Optional[Runner] = None
    ):
        self.root = str(root)
        self.git_binary = git_binary or settings.git_binary
        self._run = runner or commands.run

    async def _git(self, args: Sequence[str]) -> List[str]:
        return await self._run(self.git_binary, list(args), cwd=self.root)

    async def diff_name_status(self, since: str, branch: str) -> List[str]:
        return await self._git(['diff', '--name-status', since, branch])

    async def list_tree(self, branch: str) -> List[str]:
        return await self._git(['ls-tree', '-r', '--name-only', '--full-tree', branch])


class FindLister:
    """FileLister backed by `find <root> -type f`."""

    def __init__(
        self,
        root: str | Path,
        find_binary: Optional[str] = None,
        runner: Optional[Runner] = None
    ):
        self.root = str(root)
        self.find_binary = find_binary or settings.find_binary
        self._run = runner or commands.run

    async def list_files(self) -> List[str]:
        lines = await self._run(self.find_binary, [self.root, '-type', 'f'])
        return [
            Path(os.path.relpath(line, self.root)).as_posix()
            for line in lines
            if line
        ]
