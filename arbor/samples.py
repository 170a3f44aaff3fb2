"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Sample hash fixtures.

Generates random hex strings and reads/writes them as a newline-delimited
text file, one hash per line. The file feeds the flat root reducer from the
command line.
"""

import secrets
from pathlib import Path
from typing import Iterable, List, Union

from arbor.exceptions import SampleFileError
from arbor.logging_config import get_logger

logger = get_logger(__name__)

HEX_CHARSET = "0123456789abcdef"

DEFAULT_SAMPLE_FILE = "ts_hashes.json"


def generate_hex_string(length: int = 64) -> str:
    """
    Generate a random lowercase hex string.

    Args:
        length: Number of hex characters (64 gives a 32-byte value)

    Returns:
        Random string drawn from 0-9a-f
    """
    return "".join(secrets.choice(HEX_CHARSET) for _ in range(length))


def write_sample_hashes(
    path: Union[str, Path],
    count: int = 10,
    length: int = 64,
) -> List[str]:
    """
    Write freshly generated hex strings to a file, one per line.

    Any existing file is replaced.

    Args:
        path: Output file path
        count: Number of hashes to generate
        length: Hex characters per hash

    Returns:
        The generated hex strings, in file order

    Raises:
        SampleFileError: If the file cannot be written
    """
    path = Path(path)
    hashes = [generate_hex_string(length) for _ in range(count)]

    try:
        with open(path, "w", encoding="utf-8") as f:
            for value in hashes:
                f.write(f"{value}\n")
    except OSError as e:
        logger.error(f"Failed to write sample hashes to {path}: {e}")
        raise SampleFileError(f"Failed to write sample hashes to '{path}': {e}") from e

    logger.info("sample_hashes_written", path=str(path), count=count, length=length)
    return hashes


def read_hashes_from_file(path: Union[str, Path]) -> List[str]:
    """
    Read hex strings from a newline-delimited file.

    Blank lines are skipped and surrounding whitespace is stripped.

    Raises:
        SampleFileError: If the file cannot be read
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read sample hashes from {path}: {e}")
        raise SampleFileError(f"Failed to read sample hashes from '{path}': {e}") from e

    hashes = [line.strip() for line in lines if line.strip()]
    logger.debug("sample_hashes_read", path=str(path), count=len(hashes))
    return hashes


def decode_hashes(hex_strings: Iterable[str]) -> List[bytes]:
    """
    Decode hex strings to raw digests.

    Raises:
        SampleFileError: If an entry is not valid hex
    """
    decoded = []
    for position, value in enumerate(hex_strings, start=1):
        try:
            decoded.append(bytes.fromhex(value))
        except ValueError as e:
            raise SampleFileError(f"Invalid hex in entry {position}: {value!r}") from e
    return decoded
