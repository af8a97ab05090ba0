import logging
from subprocess import PIPE, run
from typing import Optional

logger = logging.getLogger(__name__)


def git(*args: str) -> Optional[bytes]:
    """Run a git command and return its raw stdout.

    :param args: Arguments passed to ``git``.
    :raises NotARepository: if the ``git`` executable can't be found.
    :return: The command's stdout, or None if git exited with a non-zero
        status.
    """
    logger.debug("git %s", " ".join(args))
    try:
        result = run(["git", *args], stdout=PIPE, stderr=PIPE)
    except FileNotFoundError as e:
        raise NotARepository("git executable not found") from e

    if result.returncode != 0:
        logger.debug("git exited %d: %s", result.returncode,
                     result.stderr.decode(errors="replace").strip())
        return None
    return result.stdout


class BumpCheckError(Exception):
    """Base class for every reason a version bump check can fail."""


class UnknownFileType(BumpCheckError):
    """The file's suffix doesn't map to a known file shape."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unknown file type: {path}")


class ShapeMismatch(BumpCheckError):
    """The requested check mode doesn't fit the file's shape."""

    def __init__(self, path: str, expected: str, actual: str) -> None:
        self.path = path
        super().__init__(
            f"{path} is a {actual} file, it can't be checked as {expected}.")


class FileReadError(BumpCheckError):
    """The version file in the working tree couldn't be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class ParseError(BumpCheckError):
    """Structured content couldn't be parsed."""

    def __init__(self, fmt: str, reason: str) -> None:
        super().__init__(f"Invalid {fmt} content: {reason}")


class KeyNotFound(BumpCheckError):
    """The lookup key is absent or doesn't hold a string."""

    def __init__(self, key: Optional[str]) -> None:
        self.key = key
        super().__init__(f"Version not found under key {key!r}")


class EncodingError(BumpCheckError):
    """Plain-text content isn't valid UTF-8."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Version file is not valid UTF-8 text: {reason}")


class InvalidVersionFormat(BumpCheckError):
    """A string doesn't follow the semantic versioning grammar."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Version {value!r} does not adhere to semver 🙈")


class NotARepository(BumpCheckError):
    """The working directory isn't inside a git work tree."""

    def __init__(self, reason: str = "Not inside a git repository") -> None:
        super().__init__(reason)


class NoHeadRevision(BumpCheckError):
    """The repository has no commits yet."""

    def __init__(self) -> None:
        super().__init__("Repository has no commits, HEAD can't be resolved")


class NoParentRevision(BumpCheckError):
    """HEAD is the initial commit."""

    def __init__(self) -> None:
        super().__init__("HEAD has no parent commit to compare against")


class FileNotFoundInHistory(BumpCheckError):
    """The file doesn't exist in the parent commit's tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} not found in previous commit")


class NotAFile(BumpCheckError):
    """The path resolves to a tree or other non-blob object."""

    def __init__(self, path: str, object_type: str) -> None:
        self.path = path
        super().__init__(f"{path} is a {object_type} in previous commit, "
                         "not a file")


class VersionNotIncremented(BumpCheckError):
    """The working tree version isn't greater than the previous one."""

    def __init__(self, current: str, previous: str) -> None:
        self.current = current
        self.previous = previous
        super().__init__(
            f"Current version ({current}) is not greater than previous "
            f"version ({previous}) 🦆")
