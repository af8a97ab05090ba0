"""Read file content from the commit before HEAD."""

import logging
from pathlib import Path, PurePath, PurePosixPath

from .util import (
    FileNotFoundInHistory,
    NoHeadRevision,
    NoParentRevision,
    NotAFile,
    NotARepository,
    git,
)

logger = logging.getLogger(__name__)


def _repo_path(path: str) -> str:
    """Turn a path relative to the cwd into one relative to the repo root."""
    if PurePath(path).is_absolute():
        if (top := git("rev-parse", "--show-toplevel")) is None:
            raise NotARepository()
        try:
            rel = Path(path).resolve().relative_to(
                Path(top.decode().rstrip("\n")).resolve())
        except ValueError as e:
            raise FileNotFoundInHistory(path) from e
        return rel.as_posix()

    if (prefix := git("rev-parse", "--show-prefix")) is None:
        raise NotARepository()

    parts = (PurePosixPath(prefix.decode().rstrip("\n"))
             / PurePath(path).as_posix()).parts
    resolved: list[str] = []
    for part in parts:
        if part == "..":
            if not resolved:
                raise FileNotFoundInHistory(path)
            resolved.pop()
        elif part != ".":
            resolved.append(part)
    return "/".join(resolved)


def parent_revision() -> str:
    """Return the object name of the first parent of HEAD.

    Merge commits only ever get compared against their first parent.

    :raises NotARepository: if the cwd isn't inside a git work tree.
    :raises NoHeadRevision: if the repository has no commits.
    :raises NoParentRevision: if HEAD is the initial commit.
    """
    if git("rev-parse", "--is-inside-work-tree") is None:
        raise NotARepository()
    if git("rev-parse", "--verify", "--quiet", "HEAD^{commit}") is None:
        raise NoHeadRevision()
    if (parent := git("rev-parse", "--verify", "--quiet",
                      "HEAD^1^{commit}")) is None:
        raise NoParentRevision()
    return parent.decode().strip()


def read_parent_blob(path: str) -> bytes:
    """Return the content of ``path`` as committed in HEAD's first parent.

    :param path: Path to the file, relative to the current directory.
    :raises NotARepository: if the cwd isn't inside a git work tree.
    :raises NoHeadRevision: if the repository has no commits.
    :raises NoParentRevision: if HEAD has no parent.
    :raises FileNotFoundInHistory: if ``path`` doesn't exist in the parent.
    :raises NotAFile: if ``path`` is a directory or submodule in the parent.
    :return: The raw blob content.
    """
    parent = parent_revision()
    object_name = f"{parent}:{_repo_path(path)}"
    logger.debug("Reading %s", object_name)

    if (raw_type := git("cat-file", "-t", object_name)) is None:
        raise FileNotFoundInHistory(path)
    if (object_type := raw_type.decode().strip()) != "blob":
        raise NotAFile(path, object_type)

    content = git("cat-file", "blob", object_name)
    if content is None:
        raise FileNotFoundInHistory(path)
    return content
