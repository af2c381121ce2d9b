# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""PBKDF2 with a choice of HMAC digests."""

import hashlib
from enum import Enum
from typing import Any, Mapping

from ..parameter import Parameter
from .base import PHCFunction


class Pbkdf2Algorithm(Enum):
    """The HMAC variants, by the label used in PHC strings."""

    HMAC_SHA1 = "HmacSHA1"
    HMAC_SHA224 = "HmacSHA224"
    HMAC_SHA256 = "HmacSHA256"
    HMAC_SHA384 = "HmacSHA384"
    HMAC_SHA512 = "HmacSHA512"
    HMAC_SHA3_224 = "HmacSHA3-224"
    HMAC_SHA3_256 = "HmacSHA3-256"
    HMAC_SHA3_384 = "HmacSHA3-384"
    HMAC_SHA3_512 = "HmacSHA3-512"

    @property
    def digest(self) -> str:
        """The hashlib name of the digest."""
        # HmacSHA3-256 -> sha3_256
        return self.value[len("Hmac") :].lower().replace("-", "_")


class Pbkdf2Param(Parameter):
    """PBKDF2 parameters."""

    ALG = ("alg", 1, Pbkdf2Algorithm)
    C = ("c", 2, int, 1, None)
    LENGTH = (None, 3, int, 12, 64)  # output length, never rendered


class PBKDF2(PHCFunction):
    """PBKDF2 (RFC 8018)."""

    parameter_type = Pbkdf2Param
    required = (Pbkdf2Param.ALG, Pbkdf2Param.C)
    default_salt_length = 128
    default_hash_length = 64
    length_parameter = Pbkdf2Param.LENGTH

    def _derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        secret: bytearray,
        length: int,
    ) -> bytes:
        algorithm: Pbkdf2Algorithm = params[Pbkdf2Param.ALG]
        return hashlib.pbkdf2_hmac(
            algorithm.digest,
            secret,
            salt,
            params[Pbkdf2Param.C],
            dklen=length,
        )


PBKDF2_FUNCTION = PBKDF2("pbkdf2")

__all__ = ["PBKDF2", "Pbkdf2Algorithm", "Pbkdf2Param", "PBKDF2_FUNCTION"]
