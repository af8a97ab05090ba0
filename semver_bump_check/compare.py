import logging
from pathlib import Path
from typing import NamedTuple, Optional

from .history import read_parent_blob
from .semver import Version
from .util import FileReadError, ShapeMismatch, VersionNotIncremented
from .versionfile import FileShape, extract_version, resolve_file_type

logger = logging.getLogger(__name__)


class Comparison(NamedTuple):  # noqa: D101
    current: Version
    previous: Version


def compare_versions(
        path: str,
        key: Optional[str] = None,
        shape: Optional[FileShape] = None,
) -> Comparison:
    """Check that a version file was bumped since the previous commit.

    The file type is worked out once from ``path`` and used to read both the
    working tree copy and the committed one.

    :param path: Path to the version file.
    :param key: Key holding the version, for structured files.
    :param shape: The shape the caller expects the file to have. If given
        and ``path`` resolves to a different one, the check fails.
    :raises BumpCheckError: for any reason the check can't pass.
    :return: The current and previous versions.
    """
    file_type = resolve_file_type(path)
    logger.debug("%s resolved to %s", path, file_type.value)
    if shape is not None and file_type.shape is not shape:
        raise ShapeMismatch(path, shape.value, file_type.shape.value)

    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    current = extract_version(content, file_type, key)
    previous = extract_version(read_parent_blob(path), file_type, key)

    if previous >= current:
        raise VersionNotIncremented(str(current), str(previous))
    return Comparison(current, previous)
