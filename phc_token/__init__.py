# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Parse, build and validate PHC strings.

A PHC string stores a password hashing function, its parameters, the salt
and the hash::

    $argon2id$m=65536,t=2,p=1$c29tZXNhbHQ$...

Typical use::

    from phc_token import Argon2Param, builder, parse

    token = (
        builder("argon2id")
        .with_param(Argon2Param.M, 65536)
        .with_param(Argon2Param.T, 2)
        .with_param(Argon2Param.P, 1)
        .with_random_salt()
        .hash("password")
    )
    stored = token.serialize()
    assert parse(stored).validate("password")
"""

from ._version import __version__
from .builder import TokenBuilder, builder
from .errors import (
    DerivationError,
    IncompleteToken,
    InvalidParameterValue,
    MalformedEncoding,
    MissingParameter,
    PHCError,
    SaltAlreadySet,
    SaltRequired,
    UnknownFunction,
    UnparsableToken,
)
from .functions import (
    ARGON2D,
    ARGON2I,
    ARGON2ID,
    BCRYPT,
    PBKDF2_FUNCTION,
    SCRYPT,
    Argon2Param,
    BcryptParam,
    Pbkdf2Algorithm,
    Pbkdf2Param,
    PHCFunction,
    ScryptParam,
)
from .parameter import Parameter
from .parser import parse
from .registry import DEFAULT_REGISTRY, FunctionRegistry
from .token import Token

__all__ = [
    "ARGON2D",
    "ARGON2I",
    "ARGON2ID",
    "BCRYPT",
    "DEFAULT_REGISTRY",
    "PBKDF2_FUNCTION",
    "SCRYPT",
    "Argon2Param",
    "BcryptParam",
    "DerivationError",
    "FunctionRegistry",
    "IncompleteToken",
    "InvalidParameterValue",
    "MalformedEncoding",
    "MissingParameter",
    "Parameter",
    "Pbkdf2Algorithm",
    "Pbkdf2Param",
    "PHCError",
    "PHCFunction",
    "SaltAlreadySet",
    "SaltRequired",
    "ScryptParam",
    "Token",
    "TokenBuilder",
    "UnknownFunction",
    "UnparsableToken",
    "builder",
    "parse",
    "__version__",
]
