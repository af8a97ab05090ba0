"""Pre-commit guard that a version file was bumped since the last commit.

Compares the version in the working tree copy of a file against the one
committed in the first parent of ``HEAD`` and fails unless it went up.
"""

from .compare import Comparison, compare_versions
from .semver import Version, parse_version
from .util import BumpCheckError

__version__ = "1.0.0"

__all__ = [
    "BumpCheckError",
    "Comparison",
    "Version",
    "compare_versions",
    "parse_version",
]
