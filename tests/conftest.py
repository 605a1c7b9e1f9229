"""Shared fixtures for quadhash tests."""

import pytest

# Digests pinned from a reference build of the same algorithm
# (unsigned wrapping accumulator, linear fallback for a == 0).
REGRESSION_DIGESTS = {
    "": "0000000000000000",
    "a": "685fdf50e51fa977",
    "hello": "e85b753388878edf",
    "Hello": "8d4758ec03d30c7d",
    "The quick brown fox": "e71d1261a6b438d2",
    "abc": "509799395be50e04",
    "Hi": "8392786f96320170",
    "cat": "1b2f61414e23b798",
    "dog": "16c965878091b88d",
    "café": "d663a187cd896eba",
    "heart attack": "bdf71758066eb335",
    "abcd": "c1d20803d2dec0cc",
    "ab\x00cd": "e3bdd9c435ec61f4",
}

LONG_PATTERN = "abcdefghij" * 20
LONG_PATTERN_DIGEST = "f605e4fe1c483a52"

AVALANCHE_CORPUS = [
    "hello",
    "world",
    "cache-key",
    "user:42",
    "The quick",
    "abcdef",
    "dedup tag",
    "lorem ipsum",
    "0123456789",
    "quadhash",
]


@pytest.fixture(scope="session")
def regression_digests():
    return REGRESSION_DIGESTS


@pytest.fixture(scope="session")
def avalanche_corpus():
    return AVALANCHE_CORPUS


@pytest.fixture(scope="session")
def long_pattern():
    """200 characters: wraps the accumulator many times over."""
    return LONG_PATTERN, LONG_PATTERN_DIGEST
