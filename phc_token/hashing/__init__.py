# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing and verification with PHC strings."""

from .hasher import PHCPasswordHasher, get_password_hasher
from .protocol import Hasher

__all__ = ["PHCPasswordHasher", "Hasher", "get_password_hasher"]
