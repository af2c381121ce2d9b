# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""The supported password hashing functions."""

from ._argon2 import ARGON2D, ARGON2I, ARGON2ID, Argon2, Argon2Param
from ._bcrypt import BCRYPT, Bcrypt, BcryptParam
from ._pbkdf2 import PBKDF2, PBKDF2_FUNCTION, Pbkdf2Algorithm, Pbkdf2Param
from ._scrypt import SCRYPT, Scrypt, ScryptParam
from .base import Password, PHCFunction

ALL_FUNCTIONS = (ARGON2I, ARGON2D, ARGON2ID, PBKDF2_FUNCTION, BCRYPT, SCRYPT)

__all__ = [
    "ALL_FUNCTIONS",
    "ARGON2D",
    "ARGON2I",
    "ARGON2ID",
    "Argon2",
    "Argon2Param",
    "BCRYPT",
    "Bcrypt",
    "BcryptParam",
    "PBKDF2",
    "PBKDF2_FUNCTION",
    "Password",
    "PHCFunction",
    "Pbkdf2Algorithm",
    "Pbkdf2Param",
    "SCRYPT",
    "Scrypt",
    "ScryptParam",
]
