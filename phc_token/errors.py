# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised while parsing, building and validating PHC tokens."""

from typing import List, Optional


class PHCError(Exception):
    """Base class for all PHC token errors."""


class UnparsableToken(PHCError):
    """The text does not match the PHC string grammar."""

    def __init__(self, text: str) -> None:
        # the token may hold a hash, keep it out of the message
        super().__init__("Unparsable token")
        self.length = len(text)


class UnknownFunction(PHCError):
    """The function identifier is not registered."""

    def __init__(self, function_id: str) -> None:
        super().__init__(f"Unknown function: {function_id!r}")
        self.function_id = function_id


class MalformedEncoding(PHCError):
    """The salt or hash segment is not valid unpadded base64."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Malformed base64 in the {segment} segment")
        self.segment = segment


class InvalidParameterValue(PHCError, ValueError):
    """A value is of the wrong type or outside of its parameter's domain."""

    def __init__(self, parameter: str, reason: str) -> None:
        super().__init__(f"Invalid value for parameter {parameter}: {reason}")
        self.parameter = parameter
        self.reason = reason


class MissingParameter(PHCError):
    """A parameter required for the derivation is absent."""

    def __init__(self, function_id: str, parameters: List[str]) -> None:
        names = ", ".join(parameters)
        super().__init__(
            f"Missing required parameters for {function_id}: {names}"
        )
        self.function_id = function_id
        self.parameters = parameters


class SaltAlreadySet(PHCError):
    """The builder already holds a salt."""

    def __init__(self) -> None:
        super().__init__("Salt already set")


class SaltRequired(PHCError):
    """A salt must be set before hashing."""

    def __init__(self) -> None:
        super().__init__("Salt is required")


class IncompleteToken(PHCError):
    """The token lacks the salt or the hash needed to validate a password."""

    def __init__(self, missing: str) -> None:
        super().__init__(f"Token has no {missing}")
        self.missing = missing


class DerivationError(PHCError):
    """The underlying primitive rejected its inputs."""

    def __init__(self, function_id: str, reason: Optional[str] = None) -> None:
        message = f"Derivation with {function_id} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.function_id = function_id


__all__ = [
    "PHCError",
    "UnparsableToken",
    "UnknownFunction",
    "MalformedEncoding",
    "InvalidParameterValue",
    "MissingParameter",
    "SaltAlreadySet",
    "SaltRequired",
    "IncompleteToken",
    "DerivationError",
]
