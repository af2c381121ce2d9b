# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Scrypt through hashlib."""

import hashlib
from typing import Any, Mapping

from ..errors import DerivationError
from ..parameter import Parameter
from .base import PHCFunction

# hashlib refuses a maxmem above INT_MAX
_MAXMEM_LIMIT = 2**31 - 1
_MAXMEM_SLACK = 1024 * 1024


class ScryptParam(Parameter):
    """Scrypt parameters.

    ``N`` is the cost factor itself, passed to the primitive as is. The
    primitive only accepts powers of two, so within the 2..31 range the
    usable values are 2, 4, 8 and 16.
    """

    N = ("N", 1, int, 2, 31)
    R = ("r", 2, int, 1, None)
    P = ("p", 3, int, 1, None)


class Scrypt(PHCFunction):
    """Scrypt (RFC 7914)."""

    parameter_type = ScryptParam
    required = (ScryptParam.N, ScryptParam.R, ScryptParam.P)
    default_salt_length = 128
    default_hash_length = 64

    def _derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        secret: bytearray,
        length: int,
    ) -> bytes:
        n = params[ScryptParam.N]
        r = params[ScryptParam.R]
        p = params[ScryptParam.P]
        maxmem = 128 * r * (n + p + 2) + _MAXMEM_SLACK
        if maxmem > _MAXMEM_LIMIT:
            raise DerivationError(self.id, "memory cost too high")
        try:
            return hashlib.scrypt(
                secret, salt=salt, n=n, r=r, p=p, maxmem=maxmem, dklen=length
            )
        except ValueError as error:
            raise DerivationError(self.id, str(error)) from error


SCRYPT = Scrypt("scrypt")

__all__ = ["Scrypt", "ScryptParam", "SCRYPT"]
