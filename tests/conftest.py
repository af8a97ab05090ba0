import os
import subprocess
from pathlib import Path

import pytest


class Repo:
    """A throwaway git repository to commit version files into."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args], cwd=self.root, check=True,
            capture_output=True, text=True,
        )
        return result.stdout.strip()

    def write(self, name: str, content: str | bytes) -> Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    def commit(self, message: str = "commit", **files: str | bytes) -> str:
        for name, content in files.items():
            self.write(name, content)
        self.git("add", "-A")
        self.git("commit", "-q", "--allow-empty", "-m", message)
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty directory that git won't look above."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")
    return tmp_path


@pytest.fixture
def make_repo(workdir):
    """Return a factory that initializes a repository at a given path."""
    def make(root: Path) -> Repo:
        root.mkdir(parents=True, exist_ok=True)
        repo = Repo(root)
        repo.git("init", "-q")
        return repo
    return make


@pytest.fixture
def repo(workdir, make_repo):
    return make_repo(workdir)
