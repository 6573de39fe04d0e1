"""
Tests for the command line front-end.
"""

import json

import pytest

from change_tracking import cli

from conftest import requires_find, requires_git, write


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **kw: None)


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out


@requires_find
def test_files_command(tmp_path, capsys):
    write(tmp_path / "a.txt")
    assert cli.main(["files", str(tmp_path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"a.txt": True}


@requires_find
def test_files_command_repeated_scans(tmp_path, capsys):
    write(tmp_path / "a.txt")
    assert cli.main(["files", str(tmp_path), "--count", "2", "--interval", "0"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line) for line in lines] == [{"a.txt": True}, {"a.txt": True}]


@requires_git
def test_git_command(git_repo, capsys):
    assert cli.main(["git", str(git_repo["path"]), "HEAD"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a.txt": True, "docs/b.md": True}


@requires_git
def test_git_command_error_exit_code(git_repo, capsys):
    assert cli.main(["git", str(git_repo["path"]), "HEAD", "--since", "nope"]) == 1
