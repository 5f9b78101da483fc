"""Pytest configuration and fixtures for pathnorm tests."""

import pytest

from pathnorm.normalizer import PathNormalizer
from pathnorm.platform import FixedPlatform


@pytest.fixture
def normalizer():
    """Normalizer rooted at /home/x with POSIX separators."""
    return PathNormalizer(FixedPlatform("/home/x"))


@pytest.fixture
def windows_normalizer():
    """Normalizer with a drive-letter cwd and backslash native separator."""
    return PathNormalizer(FixedPlatform("C:\\Projects\\App", separator="\\"))


@pytest.fixture
def strict_normalizer():
    """Normalizer that rejects '..' above the root."""
    return PathNormalizer(FixedPlatform("/home/x"), strict_parent=True)
