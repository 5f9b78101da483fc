"""pathnorm - Path normalization for build-file generators.

pathnorm resolves, joins, splits and translates file paths the way a
project-file generator needs them: separator-agnostic, drive-letter aware,
and independent of the host it runs on.
"""

__version__ = "0.1.0"
__author__ = "pathnorm contributors"
__description__ = "Path normalization for build-file generators"

from pathnorm.config import PathnormConfig
from pathnorm.normalizer import (
    InvalidPathError,
    PathError,
    PathNormalizer,
    PathTraversalError,
)
from pathnorm.platform import FixedPlatform, HostPlatform

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "PathnormConfig",
    "PathNormalizer",
    "PathError",
    "InvalidPathError",
    "PathTraversalError",
    "FixedPlatform",
    "HostPlatform",
]
