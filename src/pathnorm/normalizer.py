"""Path normalization: resolve, join, split and translate path strings.

Every operation is a pure string algorithm. The only outside state consulted
is the current directory, which comes from the injected platform. Results are
fresh strings, so any number of them can be held at once.
"""

import logging

from pathnorm.platform import HostPlatform, Platform

logger = logging.getLogger(__name__)

SEPARATOR = "/"
SEPARATORS = ("/", "\\")


class PathError(Exception):
    """Base class for path normalization errors."""
    pass


class InvalidPathError(PathError, ValueError):
    """Raised when a path argument is missing or malformed."""
    pass


class PathTraversalError(PathError):
    """Raised in strict mode when `..` climbs above the filesystem root."""
    pass


def _require(path: str | None, name: str = "path") -> str:
    if path is None:
        raise InvalidPathError(f"{name} must not be None")
    if not isinstance(path, str):
        raise InvalidPathError(f"{name} must be a string, got {type(path).__name__}")
    return path


class PathNormalizer:
    """Path operations bound to a platform.

    Args:
        platform: Source of the current directory and native separator
                  (default: the running host)
        strict_parent: Raise PathTraversalError when `..` would climb above
                       the root instead of silently stopping there
    """

    def __init__(self, platform: Platform | None = None, strict_parent: bool = False):
        self.platform = platform if platform is not None else HostPlatform()
        self.strict_parent = strict_parent

    def is_absolute(self, path: str) -> bool:
        """Determine if a path is rooted at the base of a filesystem.

        Args:
            path: The path to check

        Returns:
            True for a leading `/` or `\\`, or a drive letter (`C:`)

        Raises:
            InvalidPathError: If path is None or empty
        """
        path = _require(path)
        if not path:
            raise InvalidPathError("path must not be empty")

        if path[0] in SEPARATORS:
            return True
        return len(path) > 1 and path[1] == ":"

    def translate(self, path: str, separator: str | None = None) -> str:
        """Replace all path separator characters in a path.

        Args:
            path: The path to translate
            separator: The desired separator, or None for the platform's
                       native separator

        Returns:
            The translated path, same length as the input
        """
        path = _require(path)
        if separator is None:
            separator = self.platform.native_separator()
        if not isinstance(separator, str) or len(separator) != 1:
            raise InvalidPathError(f"separator must be a single character, got: {separator!r}")

        return "".join(separator if ch in SEPARATORS else ch for ch in path)

    def join(self, leading: str | None, trailing: str | None = None) -> str:
        """Join two paths together.

        If the trailing path is absolute it is returned as-is; a join is only
        performed when the trailing path is relative.

        Args:
            leading: The leading path
            trailing: The trailing path

        Returns:
            The joined path
        """
        if leading is None and trailing is None:
            raise InvalidPathError("join needs at least one path")

        if trailing is None:
            return _require(leading, "leading")

        trailing = _require(trailing, "trailing")
        if leading is None or (trailing and self.is_absolute(trailing)):
            return trailing

        leading = _require(leading, "leading")
        if leading and not leading.endswith(SEPARATOR):
            return leading + SEPARATOR + trailing
        return leading + trailing

    def split_directory(self, path: str) -> str:
        """Retrieve the directory portion of a path.

        Only `/` is recognised; translate the path first if it may contain
        backslashes.

        Returns:
            Everything before the last `/`, or "" for a bare file name
        """
        path = _require(path)
        head, sep, _ = path.rpartition(SEPARATOR)
        return head if sep else ""

    directory = split_directory

    def absolute(self, path: str) -> str:
        """Create an absolute path from a relative one.

        The relative path is applied segment by segment to the current
        directory. `.` and empty segments are skipped; `..` drops the last
        segment accumulated so far and stops at the root.

        Args:
            path: The path to resolve; "" means the current directory

        Returns:
            An absolute `/`-separated path

        Raises:
            PathTraversalError: In strict mode, if `..` climbs above the root
        """
        source = self.translate(path, SEPARATOR)
        if not source:
            source = "."

        if self.is_absolute(source):
            logger.debug(f"absolute({path!r}) -> {source!r} (already absolute)")
            return source

        # "/" and "C:/" seed as "" and "C:" so appending never doubles the separator
        result = self.translate(self.platform.current_directory(), SEPARATOR).rstrip(SEPARATOR)

        for segment in source.split(SEPARATOR):
            if segment == "..":
                up = result.rfind(SEPARATOR)
                if up >= 0:
                    result = result[:up]
                elif self.strict_parent:
                    raise PathTraversalError(f"'{path}' climbs above the root of {self.platform.current_directory()!r}")
                else:
                    logger.warning(f"Ignoring '..' above the root while resolving {path!r}")
            elif segment and segment != ".":
                result = result + SEPARATOR + segment

        if not result or (len(result) == 2 and result[1] == ":"):
            result += SEPARATOR

        logger.debug(f"absolute({path!r}) -> {result!r}")
        return result

    def assemble(self, directory: str, filename: str, extension: str | None = None) -> str:
        """Assemble a complete file path from its component parts.

        Args:
            directory: The directory portion of the path
            filename: The file name portion of the path
            extension: Appended verbatim, including its leading dot

        Returns:
            The assembled file path
        """
        directory = _require(directory, "directory")
        filename = _require(filename, "filename")

        assembled = self.join(directory, filename)
        if extension:
            assembled += extension
        return assembled
