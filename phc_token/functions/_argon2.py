# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=invalid-name
"""Argon2 (i, d and id variants) on top of argon2-cffi's low level core."""

from typing import Any, Mapping

from argon2.low_level import (  # type: ignore[unused-ignore, import-untyped]
    ARGON2_VERSION,
    Type,
    core,
    error_to_str,
    ffi,
    lib,
)

from ..errors import DerivationError
from ..parameter import Parameter
from .base import PHCFunction

UINT32_MAX = 2**32 - 1


class Argon2Param(Parameter):
    """Parameters shared by all the Argon2 variants."""

    M = ("m", 1, int, 1, UINT32_MAX)  # memory in KiB
    T = ("t", 2, int, 1, UINT32_MAX)
    P = ("p", 3, int, 1, 255)
    KEY_ID = ("keyid", 4, bytes, None, 8)
    DATA = ("data", 5, bytes, None, 32)


class Argon2(PHCFunction):
    """An Argon2 variant."""

    parameter_type = Argon2Param
    required = (Argon2Param.M, Argon2Param.T, Argon2Param.P)
    default_salt_length = 16
    default_hash_length = 32
    min_hash_length = 4

    def __init__(self, function_id: str, variant: Type) -> None:
        super().__init__(function_id)
        self.variant = variant

    def _derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        secret: bytearray,
        length: int,
    ) -> bytes:
        key_id = params.get(Argon2Param.KEY_ID) or b""
        data = params.get(Argon2Param.DATA) or b""
        lanes = params[Argon2Param.P]
        out = ffi.new("uint8_t[]", length)
        # a view on the caller's buffer, wiping it clears the password
        pwd = ffi.from_buffer("uint8_t[]", secret) if secret else ffi.NULL
        c_salt = ffi.new("uint8_t[]", salt) if salt else ffi.NULL
        c_key_id = ffi.new("uint8_t[]", key_id) if key_id else ffi.NULL
        c_data = ffi.new("uint8_t[]", data) if data else ffi.NULL
        context = ffi.new(
            "argon2_context *",
            {
                "version": ARGON2_VERSION,
                "out": out,
                "outlen": length,
                "pwd": pwd,
                "pwdlen": len(secret),
                "salt": c_salt,
                "saltlen": len(salt),
                "secret": c_key_id,
                "secretlen": len(key_id),
                "ad": c_data,
                "adlen": len(data),
                "t_cost": params[Argon2Param.T],
                "m_cost": params[Argon2Param.M],
                "lanes": lanes,
                "threads": lanes,
                "allocate_cbk": ffi.NULL,
                "free_cbk": ffi.NULL,
                "flags": lib.ARGON2_DEFAULT_FLAGS,
            },
        )
        result = core(context, self.variant.value)
        if result != lib.ARGON2_OK:
            raise DerivationError(self.id, error_to_str(result))
        return bytes(ffi.buffer(out, length))


ARGON2I = Argon2("argon2i", Type.I)
ARGON2D = Argon2("argon2d", Type.D)
ARGON2ID = Argon2("argon2id", Type.ID)

__all__ = ["Argon2", "Argon2Param", "ARGON2I", "ARGON2D", "ARGON2ID"]
