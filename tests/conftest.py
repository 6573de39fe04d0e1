"""
Shared fixtures: fake providers and throwaway git repositories.
"""

import asyncio
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from change_tracking.errors import ExternalCommandError


class FakeGit:
    """GitProvider returning canned output lines."""

    def __init__(self, diff: Optional[List[str]] = None, tree: Optional[List[str]] = None, stderr: str = ""):
        self.diff = diff or []
        self.tree = tree or []
        self.stderr = stderr
        self.calls: List[tuple] = []

    async def diff_name_status(self, since: str, branch: str) -> List[str]:
        self.calls.append(('diff', since, branch))
        if self.stderr:
            raise ExternalCommandError('git', ['diff', '--name-status', since, branch], self.stderr, 128)
        return list(self.diff)

    async def list_tree(self, branch: str) -> List[str]:
        self.calls.append(('ls-tree', branch))
        if self.stderr:
            raise ExternalCommandError('git', ['ls-tree', branch], self.stderr, 128)
        return list(self.tree)


class FakeLister:
    """FileLister whose listing can be changed between scans."""

    def __init__(self, files: Optional[List[str]] = None):
        self.files = list(files or [])
        self.fail_with: Optional[str] = None

    async def list_files(self) -> List[str]:
        if self.fail_with:
            raise ExternalCommandError('find', ['.', '-type', 'f'], self.fail_with, 1)
        return list(self.files)


class SlowLister(FakeLister):
    """FakeLister that yields to the event loop before answering."""

    async def list_files(self) -> List[str]:
        await asyncio.sleep(0)
        return await super().list_files()


@pytest.fixture
def fake_lister():
    return FakeLister()


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
requires_find = pytest.mark.skipif(shutil.which("find") is None, reason="find not installed")


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def write(path: Path, text: str = "x\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def git_repo(tmp_path: Path) -> Dict[str, object]:
    """Repository with one commit holding a.txt and docs/b.md"""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    write(repo / "a.txt", "alpha\n")
    write(repo / "docs" / "b.md", "# beta\n")
    git(repo, "add", ".")
    git(repo, "commit", "-q", "-m", "initial")
    return {"path": repo, "first": git(repo, "rev-parse", "HEAD")}
