# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher storing PHC strings."""

import logging
from typing import Optional, Union

from ..builder import TokenBuilder
from ..config import Settings
from ..errors import PHCError
from ..parser import parse
from ..registry import DEFAULT_REGISTRY, FunctionRegistry
from ..token import Token
from .protocol import Hasher

LOG = logging.getLogger(__name__)


class PHCPasswordHasher(Hasher):
    """Hash with one configuration, verify any registered function.

    Parameters
    ----------
    configuration : Union[Token, str]
        The token (or its PHC string) whose function and parameters new
        hashes use. Its salt and hash, if any, are ignored.
    salt_length : Optional[int], optional
        The salt length, by default the function's default.
    hash_length : Optional[int], optional
        The hash length, by default the function's default.
    registry : FunctionRegistry, optional
        The functions stored hashes may use.
    """

    def __init__(
        self,
        configuration: Union[Token, str],
        salt_length: Optional[int] = None,
        hash_length: Optional[int] = None,
        registry: FunctionRegistry = DEFAULT_REGISTRY,
    ) -> None:
        if isinstance(configuration, str):
            configuration = parse(configuration, registry=registry)
        self._configuration = Token(
            configuration.function, configuration.params
        )
        self._salt_length = salt_length
        self._hash_length = hash_length
        self._registry = registry

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        registry: FunctionRegistry = DEFAULT_REGISTRY,
    ) -> "PHCPasswordHasher":
        """Create a hasher from the settings.

        Parameters
        ----------
        settings : Settings
            The settings.
        registry : FunctionRegistry, optional
            The functions stored hashes may use.

        Returns
        -------
        PHCPasswordHasher
            The hasher.
        """
        return cls(
            settings.configuration_token(registry),
            salt_length=settings.salt_length,
            hash_length=settings.hash_length,
            registry=registry,
        )

    @property
    def configuration(self) -> Token:
        """The parameter-only token new hashes follow."""
        return self._configuration

    def hash(self, plain: str) -> str:
        """Hash a password with a fresh random salt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The PHC string.
        """
        token = (
            TokenBuilder(self._configuration.function)
            .with_params(self._configuration.params)
            .with_random_salt(self._salt_length)
            .hash(plain, self._hash_length)
        )
        return token.serialize()

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a password against a stored PHC string.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored PHC string.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        try:
            return parse(stored, registry=self._registry).validate(plain)
        except PHCError as error:
            LOG.debug("Could not verify a stored hash: %s", error)
            return False

    def needs_rehash(self, stored: str) -> bool:
        """Check if a stored PHC string differs from the configuration.

        Parameters
        ----------
        stored : str
            The stored PHC string.

        Returns
        -------
        bool
            True if the password should be hashed again.
        """
        try:
            token = parse(stored, registry=self._registry)
        except PHCError:
            return True
        if not token.matches_configuration(self._configuration):
            return True
        if token.hash is None:
            return True
        function = self._configuration.function
        expected_length = self._hash_length or function.default_hash_length
        return len(token.hash) != expected_length


def get_password_hasher() -> PHCPasswordHasher:
    """Get a hasher configured from the environment.

    Returns
    -------
    PHCPasswordHasher
        The hasher.
    """
    return PHCPasswordHasher.from_settings(Settings.load())


__all__ = ["PHCPasswordHasher", "get_password_hasher"]
