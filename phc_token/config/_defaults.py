# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Defaults for newly hashed passwords.

Environment variables (with prefix PHC_TOKEN_)
----------------------------------------------
DEFAULT_FUNCTION (str) # default: argon2id
ARGON2_MEMORY_COST (int) # default: 65536 (KiB)
ARGON2_TIME_COST (int) # default: 2
ARGON2_PARALLELISM (int) # default: 1
PBKDF2_ALGORITHM (str) # default: HmacSHA256
PBKDF2_ITERATIONS (int) # default: 600000
SCRYPT_COST (int) # default: 16 (cost factor N, a power of two)
SCRYPT_BLOCK_SIZE (int) # default: 8
SCRYPT_PARALLELISM (int) # default: 1
BCRYPT_COST (int) # default: 12
SALT_LENGTH (int) # default: None (the function's default)
HASH_LENGTH (int) # default: None (the function's default)

Command line arguments (no prefix)
----------------------------------
--default-function (str)
--argon2-memory-cost (int)
--argon2-time-cost (int)
--argon2-parallelism (int)
--pbkdf2-algorithm (str)
--pbkdf2-iterations (int)
--scrypt-cost (int)
--scrypt-block-size (int)
--scrypt-parallelism (int)
--bcrypt-cost (int)
--salt-length (int)
--hash-length (int)
"""

from typing import Optional

from ._common import get_value


def get_default_function() -> str:
    """Get the identifier of the function used for new hashes.

    Returns
    -------
    str
        The function identifier
    """
    return get_value("--default-function", "DEFAULT_FUNCTION", str, "argon2id")


def get_argon2_memory_cost() -> int:
    """Get the Argon2 memory cost in KiB.

    Returns
    -------
    int
        The memory cost
    """
    return get_value("--argon2-memory-cost", "ARGON2_MEMORY_COST", int, 65536)


def get_argon2_time_cost() -> int:
    """Get the Argon2 number of passes.

    Returns
    -------
    int
        The time cost
    """
    return get_value("--argon2-time-cost", "ARGON2_TIME_COST", int, 2)


def get_argon2_parallelism() -> int:
    """Get the Argon2 number of lanes.

    Returns
    -------
    int
        The parallelism
    """
    return get_value("--argon2-parallelism", "ARGON2_PARALLELISM", int, 1)


def get_pbkdf2_algorithm() -> str:
    """Get the PBKDF2 HMAC label.

    Returns
    -------
    str
        The algorithm label, e.g. HmacSHA256
    """
    return get_value(
        "--pbkdf2-algorithm", "PBKDF2_ALGORITHM", str, "HmacSHA256"
    )


def get_pbkdf2_iterations() -> int:
    """Get the PBKDF2 iteration count.

    Returns
    -------
    int
        The iteration count
    """
    return get_value("--pbkdf2-iterations", "PBKDF2_ITERATIONS", int, 600000)


def get_scrypt_cost() -> int:
    """Get the scrypt cost factor.

    Returns
    -------
    int
        The cost factor N, a power of two
    """
    return get_value("--scrypt-cost", "SCRYPT_COST", int, 16)


def get_scrypt_block_size() -> int:
    """Get the scrypt block size.

    Returns
    -------
    int
        The block size
    """
    return get_value("--scrypt-block-size", "SCRYPT_BLOCK_SIZE", int, 8)


def get_scrypt_parallelism() -> int:
    """Get the scrypt parallelism.

    Returns
    -------
    int
        The parallelism
    """
    return get_value("--scrypt-parallelism", "SCRYPT_PARALLELISM", int, 1)


def get_bcrypt_cost() -> int:
    """Get the bcrypt cost.

    Returns
    -------
    int
        The cost
    """
    return get_value("--bcrypt-cost", "BCRYPT_COST", int, 12)


def get_salt_length() -> Optional[int]:
    """Get the salt length override.

    Returns
    -------
    Optional[int]
        The salt length, None for the function's default
    """
    return get_value("--salt-length", "SALT_LENGTH", int, None)


def get_hash_length() -> Optional[int]:
    """Get the hash length override.

    Returns
    -------
    Optional[int]
        The hash length, None for the function's default
    """
    return get_value("--hash-length", "HASH_LENGTH", int, None)
