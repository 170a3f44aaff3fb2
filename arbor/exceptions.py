"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Exception hierarchy for Arbor.

All custom exceptions inherit from ArborError base class.
"""


class ArborError(Exception):
    """Base exception for all Arbor errors."""
    pass


# Merkle Errors
class MerkleError(ArborError):
    """Base exception for Merkle tree errors."""
    pass


class EmptyTreeError(MerkleError):
    """Raised when a tree or root is requested over zero items."""
    pass


class UnsupportedHashAlgorithmError(MerkleError):
    """Raised when a hash algorithm name is not supported."""
    pass


# Sample File Errors
class SampleFileError(ArborError):
    """Raised when a sample hash file cannot be read or decoded."""
    pass


# Configuration Errors
class ConfigurationError(ArborError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
