"""Working out what kind of version file we have and pulling a version out."""

import json
import logging
import tomllib
from enum import Enum
from pathlib import PurePath
from typing import Any, Optional

import yaml

from .semver import Version, parse_version
from .util import EncodingError, KeyNotFound, ParseError, UnknownFileType

logger = logging.getLogger(__name__)


class FileShape(Enum):  # noqa: D101
    STRUCTURED = "structured"
    PLAIN_TEXT = "plain"


class FileType(Enum):
    """A concrete version file format, and the shape it's read with."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"
    PLAIN = "plain"

    @property
    def shape(self) -> FileShape:  # noqa: D102
        if self is FileType.PLAIN:
            return FileShape.PLAIN_TEXT
        return FileShape.STRUCTURED


SUFFIXES = {
    "json": FileType.JSON,
    "toml": FileType.TOML,
    "yaml": FileType.YAML,
    "yml": FileType.YAML,
}


def resolve_file_type(path: str) -> FileType:
    """Map a file path to the format its version is stored in.

    Only the file name counts: ``VERSION`` is plain text, ``package.json``
    is JSON, and ``version.txt`` is not something we know how to read.

    :param path: Path to the version file.
    :raises UnknownFileType: if the suffix isn't recognized.
    :return: The `FileType` for ``path``.
    """
    name = PurePath(path).name
    if not name:
        raise UnknownFileType(path)
    if "." not in name:
        return FileType.PLAIN

    suffix = name.rsplit(".", 1)[-1]
    if (file_type := SUFFIXES.get(suffix)) is None:
        raise UnknownFileType(path)
    return file_type


def _load(content: bytes, file_type: FileType) -> Any:
    try:
        match file_type:
            case FileType.JSON:
                return json.loads(content)
            case FileType.TOML:
                return tomllib.loads(content.decode("utf-8"))
            case FileType.YAML:
                return yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        # JSONDecodeError, TOMLDecodeError and UnicodeDecodeError are all
        #   ValueErrors.
        raise ParseError(file_type.value, str(e)) from e
    raise ValueError(f"{file_type} is not a structured format")


def _lookup(data: Any, key: Optional[str]) -> str:
    if not key or not isinstance(data, dict):
        raise KeyNotFound(key)

    if key in data:
        value = data[key]
    else:
        # Fall back to walking nested tables, e.g. `project.version`.
        value = data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                raise KeyNotFound(key)
            value = value[part]

    if not isinstance(value, str):
        raise KeyNotFound(key)
    return value


def extract_version(
        content: bytes,
        file_type: FileType,
        key: Optional[str] = None,
) -> Version:
    """Extract a semantic version from the raw content of a version file.

    :param content: The file's bytes.
    :param file_type: How to interpret ``content``.
    :param key: Key holding the version in a structured file. Ignored for
        plain text.
    :raises ParseError: if structured content is malformed.
    :raises KeyNotFound: if ``key`` is missing or not a string.
    :raises EncodingError: if plain-text content isn't UTF-8.
    :raises InvalidVersionFormat: if the extracted string isn't semver.
    :return: The parsed `Version`.
    """
    if file_type.shape is FileShape.STRUCTURED:
        version_str = _lookup(_load(content, file_type), key)
    else:
        try:
            version_str = content.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise EncodingError(str(e)) from e

    version = parse_version(version_str)
    logger.debug("Extracted %s from %s content", version, file_type.value)
    return version
