# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Building tokens from a password."""

import logging
import secrets
from typing import Any, Dict, Mapping, Optional, Union

from .errors import (
    InvalidParameterValue,
    SaltAlreadySet,
    SaltRequired,
    UnknownFunction,
)
from .functions import Password, PHCFunction
from .parameter import Parameter
from .registry import DEFAULT_REGISTRY, FunctionRegistry
from .token import Token

LOG = logging.getLogger(__name__)


class TokenBuilder:
    """Accumulate parameters and a salt, then hash a password.

    A builder is not thread safe. It can be reused after :meth:`hash`,
    the parameters and the salt are kept.

    Parameters
    ----------
    function : PHCFunction
        The function new tokens use.
    """

    def __init__(self, function: PHCFunction) -> None:
        self._function = function
        self._params: Dict[Parameter, Any] = {}
        self._salt: Optional[bytes] = None

    @property
    def function(self) -> PHCFunction:
        """The function new tokens use."""
        return self._function

    def with_param(self, param: Parameter, value: Any) -> "TokenBuilder":
        """Set a parameter, replacing any previous value.

        Parameters
        ----------
        param : Parameter
            One of the function's parameters.
        value : Any
            The value, None removes the parameter.

        Returns
        -------
        TokenBuilder
            This builder.

        Raises
        ------
        InvalidParameterValue
            If the parameter is not the function's or the value is invalid.
        """
        if not self._function.owns(param):
            raise InvalidParameterValue(
                param.label, f"not a parameter of {self._function.id}"
            )
        validated = param.validate(value)
        if validated is None:
            self._params.pop(param, None)
        else:
            self._params[param] = validated
        return self

    def with_params(self, params: Mapping[Parameter, Any]) -> "TokenBuilder":
        """Set several parameters at once.

        Parameters
        ----------
        params : Mapping[Parameter, Any]
            The parameters and their values.

        Returns
        -------
        TokenBuilder
            This builder.
        """
        for param, value in params.items():
            self.with_param(param, value)
        return self

    def with_salt(self, salt: bytes) -> "TokenBuilder":
        """Use the given salt.

        Parameters
        ----------
        salt : bytes
            The salt, copied.

        Returns
        -------
        TokenBuilder
            This builder.

        Raises
        ------
        SaltAlreadySet
            If a salt was already set.
        """
        if self._salt is not None:
            raise SaltAlreadySet()
        self._salt = bytes(salt)
        return self

    def with_random_salt(self, length: Optional[int] = None) -> "TokenBuilder":
        """Use a salt from a cryptographically secure source.

        Parameters
        ----------
        length : Optional[int], optional
            The salt length, by default the function's default salt length.

        Returns
        -------
        TokenBuilder
            This builder.

        Raises
        ------
        SaltAlreadySet
            If a salt was already set.
        """
        if self._salt is not None:
            raise SaltAlreadySet()
        if length is None:
            length = self._function.default_salt_length
        self._salt = secrets.token_bytes(length)
        return self

    def hash(self, password: Password, length: Optional[int] = None) -> Token:
        """Hash a password into a new token.

        Parameters
        ----------
        password : Password
            The cleartext password.
        length : Optional[int], optional
            The hash length. Defaults to the function's internal length
            parameter if set, else to the function's default hash length.

        Returns
        -------
        Token
            The token holding parameters, salt and hash.

        Raises
        ------
        SaltRequired
            If no salt was set.
        """
        if self._salt is None:
            raise SaltRequired()
        length_parameter = self._function.length_parameter
        if length is None and length_parameter is not None:
            length = self._params.get(length_parameter)
        LOG.debug("Hashing a password with %s", self._function.id)
        digest = self._function.derive(
            self._params, self._salt, password, length
        )
        return Token(self._function, self._params, self._salt, digest)


def builder(
    function: Union[str, PHCFunction],
    registry: FunctionRegistry = DEFAULT_REGISTRY,
) -> TokenBuilder:
    """Get a builder for a function.

    Parameters
    ----------
    function : Union[str, PHCFunction]
        The function or its identifier.
    registry : FunctionRegistry, optional
        Where identifiers are looked up, by default all known functions.

    Returns
    -------
    TokenBuilder
        A new builder.

    Raises
    ------
    UnknownFunction
        If the identifier is not registered.
    """
    if isinstance(function, str):
        found = registry.lookup(function)
        if found is None:
            raise UnknownFunction(function)
        function = found
    return TokenBuilder(function)


__all__ = ["TokenBuilder", "builder"]
