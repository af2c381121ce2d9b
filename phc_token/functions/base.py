# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Base class of the password hashing functions."""

import abc
import logging
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Tuple, Type, Union

from ..errors import DerivationError, MissingParameter
from ..parameter import Parameter

Password = Union[str, bytes, bytearray]
"""A cleartext password, text is encoded as UTF-8."""

LOG = logging.getLogger(__name__)


def password_to_buffer(password: Password) -> bytearray:
    """Copy a password into a mutable buffer that can be wiped.

    Parameters
    ----------
    password : Password
        The cleartext password.

    Returns
    -------
    bytearray
        The password bytes.
    """
    if isinstance(password, str):
        return bytearray(password, "utf-8")
    return bytearray(password)


def wipe(buffer: bytearray) -> None:
    """Overwrite a buffer with zeros in place.

    Parameters
    ----------
    buffer : bytearray
        The buffer to clear.
    """
    for index in range(len(buffer)):
        buffer[index] = 0


class PHCFunction(abc.ABC):
    """A password hashing function usable in PHC strings.

    Subclasses declare the :class:`Parameter` family they own, the
    parameters a derivation cannot do without and their default salt and
    hash lengths, then implement :meth:`_derive` by calling the actual
    primitive.
    """

    parameter_type: ClassVar[Type[Parameter]]
    required: ClassVar[Tuple[Parameter, ...]] = ()
    default_salt_length: ClassVar[int]
    default_hash_length: ClassVar[int]
    length_parameter: ClassVar[Optional[Parameter]] = None
    min_hash_length: ClassVar[int] = 1
    max_hash_length: ClassVar[Optional[int]] = None

    def __init__(self, function_id: str) -> None:
        self._id = function_id
        self._parameters: Mapping[str, Parameter] = MappingProxyType(
            {
                param.key: param
                for param in self.parameter_type
                if param.key is not None
            }
        )

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """The identifier used in PHC strings."""
        return self._id

    @property
    def parameters(self) -> Mapping[str, Parameter]:
        """The renderable parameters by name."""
        return self._parameters

    def get_parameter(self, name: str) -> Optional[Parameter]:
        """Get the parameter rendered as ``name``.

        Parameters
        ----------
        name : str
            The parameter name as found in a PHC string.

        Returns
        -------
        Optional[Parameter]
            The parameter, or None if this function has no such parameter.
        """
        return self._parameters.get(name)

    def owns(self, param: Parameter) -> bool:
        """Check whether a parameter belongs to this function.

        Parameters
        ----------
        param : Parameter
            The parameter to check.

        Returns
        -------
        bool
            True if the parameter is one of this function's.
        """
        return isinstance(param, self.parameter_type)

    def supports_length(self, length: int) -> bool:
        """Check whether the function can derive ``length`` bytes.

        Parameters
        ----------
        length : int
            The output length.

        Returns
        -------
        bool
            True if the length is within the function's range.
        """
        if length < self.min_hash_length:
            return False
        return self.max_hash_length is None or length <= self.max_hash_length

    def derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        password: Password,
        length: Optional[int] = None,
    ) -> bytes:
        """Derive ``length`` bytes from a password.

        Parameters
        ----------
        params : Mapping[Parameter, Any]
            The validated parameters.
        salt : bytes
            The salt.
        password : Password
            The cleartext password, wiped from memory after use.
        length : Optional[int], optional
            The output length, by default the function's default length.

        Returns
        -------
        bytes
            The derived bytes.

        Raises
        ------
        MissingParameter
            If a required parameter is absent.
        DerivationError
            If the length is out of range or the primitive fails.
        """
        missing = [p.label for p in self.required if params.get(p) is None]
        if missing:
            raise MissingParameter(self.id, missing)
        if length is None:
            length = self.default_hash_length
        if not self.supports_length(length):
            raise DerivationError(self.id, f"unsupported length {length}")
        LOG.debug("Deriving %d bytes with %s", length, self.id)
        secret = password_to_buffer(password)
        try:
            return self._derive(params, bytes(salt), secret, length)
        finally:
            wipe(secret)

    @abc.abstractmethod
    def _derive(
        self,
        params: Mapping[Parameter, Any],
        salt: bytes,
        secret: bytearray,
        length: int,
    ) -> bytes:
        """Run the primitive (``secret`` is wiped by the caller)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"


__all__ = ["PHCFunction", "Password", "password_to_buffer", "wipe"]
