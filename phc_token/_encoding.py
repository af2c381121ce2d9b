# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Unpadded standard base64, as used by PHC strings."""

import base64
import binascii


def b64encode(data: bytes) -> str:
    """Encode bytes as unpadded standard base64.

    Parameters
    ----------
    data : bytes
        The bytes to encode.

    Returns
    -------
    str
        The encoded text, without trailing ``=``.
    """
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(text: str) -> bytes:
    """Decode unpadded standard base64.

    Parameters
    ----------
    text : str
        The encoded text (padding is optional).

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid base64.
    """
    stripped = text.rstrip("=")
    if len(stripped) % 4 == 1:
        raise ValueError("Invalid base64 length")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.b64decode(padded.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as error:
        raise ValueError(str(error)) from error


__all__ = ["b64encode", "b64decode"]
