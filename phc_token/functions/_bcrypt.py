# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt through pycryptodome's EksBlowfish."""

from typing import Any, Mapping

# pylint: disable-next=import-private-name
from Crypto.Protocol.KDF import _bcrypt_hash

from ..errors import DerivationError
from ..parameter import Parameter
from .base import PHCFunction, wipe

_MAGIC = b"OrpheanBeholderScryDoubt"


class BcryptParam(Parameter):
    """Bcrypt parameters."""

    C = ("c", 1, int, 4, 31)


class Bcrypt(PHCFunction):
    """Bcrypt, producing all 24 bytes of the encrypted magic value.

    The key is the password followed by a NUL byte and can hold at most
    72 bytes, so passwords longer than 71 bytes are refused instead of
    being truncated. The first 23 bytes are the digest carried by the
    modular crypt format (``$2b$``).
    """

    parameter_type = BcryptParam
    required = (BcryptParam.C,)
    default_salt_length = 16
    default_hash_length = 24
    min_hash_length = 24
    max_hash_length = 24

    def _derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        secret: bytearray,
        length: int,
    ) -> bytes:
        if len(salt) != self.default_salt_length:
            raise DerivationError(
                self.id, f"salt must be {self.default_salt_length} bytes long"
            )
        key = bytearray(len(secret) + 1)
        key[: len(secret)] = secret
        try:
            return _bcrypt_hash(key, params[BcryptParam.C], salt, _MAGIC, True)
        except ValueError as error:
            raise DerivationError(self.id, str(error)) from error
        finally:
            wipe(key)


BCRYPT = Bcrypt("bcrypt")

__all__ = ["Bcrypt", "BcryptParam", "BCRYPT"]
