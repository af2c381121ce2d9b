# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=too-many-arguments,too-many-positional-arguments
"""Typed parameters of password hashing functions.

Each function family declares its parameters as members of a
:class:`Parameter` subclass, for example::

    class ScryptParam(Parameter):
        N = ("N", 1, int, 2, 31)

A member carries ``(key, priority, value_type, low, high)``:

- ``key`` is the name rendered in a PHC string. ``None`` marks an
  internal-only parameter that tunes the derivation but is never rendered.
- ``priority`` orders the parameters of a function when rendering.
- ``value_type`` is ``int``, ``bytes``, ``str`` or an :class:`enum.Enum`.
- ``low`` and ``high`` bound an integer value or the length of a bytes
  value (inclusive, ``None`` for unbounded).
"""

import re
from enum import Enum
from typing import Any, Optional, Tuple

from ._encoding import b64decode, b64encode
from .errors import InvalidParameterValue

_DECIMAL_RE = re.compile(r"-?[0-9]+")


class Parameter(Enum):
    """Base class for the parameters of a function family."""

    def __init__(
        self,
        key: Optional[str],
        priority: int,
        value_type: type,
        low: Optional[int] = None,
        high: Optional[int] = None,
    ) -> None:
        self.key = key
        self.priority = priority
        self.value_type = value_type
        self.low = low
        self.high = high

    @property
    def label(self) -> str:
        """Name used in messages (internal-only parameters have no key)."""
        return self.key if self.key is not None else self.name.lower()

    @property
    def renderable(self) -> bool:
        """Whether the parameter appears in a PHC string."""
        return self.key is not None

    @property
    def sort_key(self) -> Tuple[int, bool, str, str]:
        """Priority, then key (absent first), then value type name."""
        value_type = self.value_type
        type_name = f"{value_type.__module__}.{value_type.__qualname__}"
        return (
            self.priority,
            self.key is not None,
            self.key or "",
            type_name,
        )

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self.sort_key < other.sort_key

    def validate(self, raw: Any) -> Any:
        """Convert and check a value for this parameter.

        Parameters
        ----------
        raw : Any
            The value, either already typed or in its textual form.

        Returns
        -------
        Any
            The typed value, or None if ``raw`` is None.

        Raises
        ------
        InvalidParameterValue
            If the value cannot be converted or is out of range.
        """
        if raw is None:
            return None
        value = self._coerce(raw)
        self._check(value)
        return value

    def render(self, value: Any) -> str:
        """Render a validated value in its textual form.

        Parameters
        ----------
        value : Any
            The value to render.

        Returns
        -------
        str
            The text used in a PHC string.
        """
        if isinstance(value, (bytes, bytearray)):
            return b64encode(bytes(value))
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def _coerce(self, raw: Any) -> Any:
        if isinstance(raw, str) and self.value_type is not str:
            return self._from_text(raw)
        buffer_types = (bytearray, memoryview)
        if self.value_type is bytes and isinstance(raw, buffer_types):
            return bytes(raw)
        if isinstance(raw, bool) or not isinstance(raw, self.value_type):
            raise InvalidParameterValue(
                self.label,
                f"expected {self.value_type.__name__}, "
                f"got {type(raw).__name__}",
            )
        return raw

    def _from_text(self, text: str) -> Any:
        if self.value_type is int:
            if not _DECIMAL_RE.fullmatch(text):
                raise InvalidParameterValue(self.label, "not an integer")
            return int(text)
        if self.value_type is bytes:
            try:
                return b64decode(text)
            except ValueError as error:
                raise InvalidParameterValue(
                    self.label, "not valid base64"
                ) from error
        if issubclass(self.value_type, Enum):
            try:
                return self.value_type(text)
            except ValueError as error:
                raise InvalidParameterValue(
                    self.label, f"unknown value {text!r}"
                ) from error
        raise InvalidParameterValue(self.label, "unknown conversion")

    def _check(self, value: Any) -> None:
        if isinstance(value, int):
            measured, what = value, "value"
        elif isinstance(value, bytes):
            measured, what = len(value), "length"
        else:
            return
        if self.low is not None and measured < self.low:
            raise InvalidParameterValue(
                self.label, f"{what} must be at least {self.low}"
            )
        if self.high is not None and measured > self.high:
            raise InvalidParameterValue(
                self.label, f"{what} must be at most {self.high}"
            )


__all__ = ["Parameter"]
