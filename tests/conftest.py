"""
Pytest configuration and shared fixtures for Arbor tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from hypothesis import settings, Verbosity


def example_blocks(n: int) -> List[bytes]:
    """
    Build n single-byte blocks: [0x00], [0x01], ...

    Args:
        n: Number of blocks (at most 256)

    Returns:
        List of one-byte data blocks
    """
    return [bytes([i]) for i in range(n)]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def four_blocks() -> List[bytes]:
    """Blocks [0x00], [0x01], [0x02], [0x03]."""
    return example_blocks(4)


@pytest.fixture
def sample_hash_file(temp_dir: Path) -> Path:
    """
    Create a sample hash file with the SHA-256 digests of [0x00]..[0x03].

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the newline-delimited hex file.
    """
    path = temp_dir / "ts_hashes.json"
    path.write_text(
        "6e340b9cffb37a989ca544e6bb780a2c78901d3fb33738768511a30617afa01d\n"
        "4bf5122f344554c53bde2ebb8cd2b7e3d1600ad631c385a5d7cce23c7785459a\n"
        "dbc1b4c900ffe48d575b5da5c638040125f65db0fe3e24494b76ea986457d986\n"
        "084fed08b978af4d7d196a7446a86b58009e636b611db16211b65a9aadff29c5\n"
    )
    return path


@pytest.fixture
def make_config_yaml(temp_dir: Path):
    """
    Factory fixture that writes a config file and returns its path.

    Usage:
        def test_something(make_config_yaml):
            config_path = make_config_yaml("hashing:\\n  algorithm: sha3_256\\n")
    """
    def _make_config(content: str, name: str = "config.yaml") -> Path:
        config_path = temp_dir / name
        config_path.write_text(content)
        return config_path
    return _make_config


# Register custom profiles for Arbor property-based tests
settings.register_profile("arbor", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("arbor-ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("arbor-dev", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "arbor"))


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers left behind by tests that configure logging."""
    yield
    logging.getLogger().handlers.clear()
