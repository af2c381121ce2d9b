# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=redefined-builtin
"""The immutable representation of a PHC string."""

import hmac
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ._encoding import b64encode
from .errors import IncompleteToken, InvalidParameterValue
from .functions import Password, PHCFunction
from .parameter import Parameter


def constant_time_equals(expected: bytes, actual: bytes) -> bool:
    """Compare two byte strings in time independent of their content.

    A length mismatch still runs a full-length comparison.

    Parameters
    ----------
    expected : bytes
        The stored bytes.
    actual : bytes
        The bytes to check.

    Returns
    -------
    bool
        True if both are equal.
    """
    same_length = len(expected) == len(actual)
    candidate = actual if same_length else expected
    return hmac.compare_digest(expected, candidate) & same_length


@dataclass(frozen=True)
class Token:
    """A function, its parameters, and optionally a salt and a hash.

    Parameters are validated and ordered on construction. Internal-only
    parameters (those without a key) are not kept since they can not
    survive a round trip through the textual form.
    """

    function: PHCFunction
    params: Mapping[Parameter, Any] = field(default_factory=dict)
    salt: Optional[bytes] = field(default=None, repr=False)
    hash: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        ordered: Dict[Parameter, Any] = {}
        for param in sorted(self.params):
            if not self.function.owns(param):
                raise InvalidParameterValue(
                    param.label, f"not a parameter of {self.function.id}"
                )
            value = param.validate(self.params[param])
            if value is not None and param.renderable:
                ordered[param] = value
        object.__setattr__(self, "params", MappingProxyType(ordered))
        if self.salt is not None:
            object.__setattr__(self, "salt", bytes(self.salt))
        if self.hash is not None:
            object.__setattr__(self, "hash", bytes(self.hash))

    def __hash__(self) -> int:
        return hash(
            (self.function.id, tuple(self.params.items()), self.salt, self.hash)
        )

    @property
    def function_id(self) -> str:
        """The function identifier."""
        return self.function.id

    def get_param(self, param: Parameter) -> Any:
        """Get the value of a parameter.

        Parameters
        ----------
        param : Parameter
            The parameter.

        Returns
        -------
        Any
            The value, or None if not set.
        """
        return self.params.get(param)

    def validate(self, password: Password) -> bool:
        """Check a password against the stored hash.

        Parameters
        ----------
        password : Password
            The candidate password.

        Returns
        -------
        bool
            True if the password produces the stored hash.

        Raises
        ------
        IncompleteToken
            If the token has no salt or no hash.
        """
        if self.salt is None:
            raise IncompleteToken("salt")
        if self.hash is None:
            raise IncompleteToken("hash")
        length: Optional[int] = len(self.hash)
        if not self.function.supports_length(len(self.hash)):
            # compare against a default length hash, which never matches
            length = None
        candidate = self.function.derive(
            self.params, self.salt, password, length
        )
        return constant_time_equals(self.hash, candidate)

    def matches_configuration(self, other: "Token") -> bool:
        """Check whether two tokens share function and parameters.

        Parameters
        ----------
        other : Token
            The token to compare with.

        Returns
        -------
        bool
            True if salt and hash are the only possible differences.
        """
        return self.function is other.function and dict(self.params) == dict(
            other.params
        )

    def serialize(self) -> str:
        """Render the token as a PHC string.

        Returns
        -------
        str
            The PHC string.
        """
        parts = [f"${self.function.id}"]
        rendered = [
            f"{param.key}={param.render(value)}"
            for param, value in self.params.items()
        ]
        if rendered:
            parts.append("$" + ",".join(rendered))
        if self.salt is not None:
            parts.append("$" + b64encode(self.salt))
            if self.hash is not None:
                parts.append("$" + b64encode(self.hash))
        return "".join(parts)

    def __str__(self) -> str:
        return self.serialize()


__all__ = ["Token", "constant_time_equals"]
