# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""PHC token settings module."""

import logging
import re
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import LogLevel
from ..errors import UnknownFunction
from ..functions import (
    Argon2Param,
    BcryptParam,
    PHCFunction,
    Pbkdf2Algorithm,
    Pbkdf2Param,
    ScryptParam,
)
from ..parameter import Parameter
from ..registry import DEFAULT_REGISTRY, FunctionRegistry
from ..token import Token
from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._defaults import (
    get_argon2_memory_cost,
    get_argon2_parallelism,
    get_argon2_time_cost,
    get_bcrypt_cost,
    get_default_function,
    get_hash_length,
    get_pbkdf2_algorithm,
    get_pbkdf2_iterations,
    get_salt_length,
    get_scrypt_block_size,
    get_scrypt_cost,
    get_scrypt_parallelism,
)

LOG = logging.getLogger(__name__)

_FUNCTION_ID_RE = re.compile(r"[a-z0-9-]+")


class Settings(BaseSettings):
    """Settings class."""

    default_function: str = get_default_function()
    # Argon2
    argon2_memory_cost: Annotated[int, Field(ge=1, le=2**32 - 1)] = (
        get_argon2_memory_cost()
    )
    argon2_time_cost: Annotated[int, Field(ge=1, le=2**32 - 1)] = (
        get_argon2_time_cost()
    )
    argon2_parallelism: Annotated[int, Field(ge=1, le=255)] = (
        get_argon2_parallelism()
    )
    # PBKDF2
    pbkdf2_algorithm: str = get_pbkdf2_algorithm()
    pbkdf2_iterations: Annotated[int, Field(ge=1)] = get_pbkdf2_iterations()
    # Scrypt
    scrypt_cost: Annotated[int, Field(ge=2, le=31)] = get_scrypt_cost()
    scrypt_block_size: Annotated[int, Field(ge=1)] = get_scrypt_block_size()
    scrypt_parallelism: Annotated[int, Field(ge=1)] = get_scrypt_parallelism()
    # Bcrypt
    bcrypt_cost: Annotated[int, Field(ge=4, le=31)] = get_bcrypt_cost()
    #
    salt_length: Optional[Annotated[int, Field(ge=1)]] = get_salt_length()
    hash_length: Optional[Annotated[int, Field(ge=1)]] = get_hash_length()
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,
    )

    @field_validator("default_function")
    @classmethod
    def validate_default_function(cls, value: str) -> str:
        """Validate the function identifier format.

        Parameters
        ----------
        value : str
            The identifier

        Returns
        -------
        str
            The identifier

        Raises
        ------
        ValueError
            If the identifier can not appear in a PHC string
        """
        if not _FUNCTION_ID_RE.fullmatch(value):
            raise ValueError(f"Invalid function identifier: {value!r}")
        return value

    @field_validator("pbkdf2_algorithm")
    @classmethod
    def validate_pbkdf2_algorithm(cls, value: str) -> str:
        """Validate the PBKDF2 algorithm label.

        Parameters
        ----------
        value : str
            The label

        Returns
        -------
        str
            The label

        Raises
        ------
        ValueError
            If the label is unknown
        """
        labels = [algorithm.value for algorithm in Pbkdf2Algorithm]
        if value not in labels:
            raise ValueError(
                f"Invalid PBKDF2 algorithm, expected one of {labels}"
            )
        return value

    @field_validator("scrypt_cost")
    @classmethod
    def validate_scrypt_cost(cls, value: int) -> int:
        """Validate the scrypt cost factor.

        Parameters
        ----------
        value : int
            The cost factor

        Returns
        -------
        int
            The cost factor

        Raises
        ------
        ValueError
            If the cost factor is not a power of two
        """
        if value & (value - 1):
            raise ValueError(f"scrypt cost must be a power of two: {value}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> str:
        """Upper case and validate the log level.

        Parameters
        ----------
        value : Any
            The log level

        Returns
        -------
        str
            The log level

        Raises
        ------
        ValueError
            If the log level is unknown
        """
        upper = str(value).upper()
        if upper not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {value!r}")
        return upper

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings, reading a .env file first if present.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        return cls()

    def function_params(self, function: PHCFunction) -> Dict[Parameter, Any]:
        """Get the configured parameters of a function.

        Parameters
        ----------
        function : PHCFunction
            The function

        Returns
        -------
        Dict[Parameter, Any]
            The parameters new hashes should use
        """
        family = function.parameter_type
        if family is Argon2Param:
            return {
                Argon2Param.M: self.argon2_memory_cost,
                Argon2Param.T: self.argon2_time_cost,
                Argon2Param.P: self.argon2_parallelism,
            }
        if family is Pbkdf2Param:
            return {
                Pbkdf2Param.ALG: self.pbkdf2_algorithm,
                Pbkdf2Param.C: self.pbkdf2_iterations,
            }
        if family is ScryptParam:
            return {
                ScryptParam.N: self.scrypt_cost,
                ScryptParam.R: self.scrypt_block_size,
                ScryptParam.P: self.scrypt_parallelism,
            }
        if family is BcryptParam:
            return {BcryptParam.C: self.bcrypt_cost}
        LOG.warning("No configured parameters for %s", function.id)
        return {}

    def configuration_token(
        self, registry: FunctionRegistry = DEFAULT_REGISTRY
    ) -> Token:
        """Get the parameter-only token new hashes should follow.

        Parameters
        ----------
        registry : FunctionRegistry, optional
            Where the default function is looked up

        Returns
        -------
        Token
            A token without salt and hash

        Raises
        ------
        UnknownFunction
            If the default function is not registered
        """
        function = registry.lookup(self.default_function)
        if function is None:
            raise UnknownFunction(self.default_function)
        return Token(function, self.function_params(function))


__all__ = ["Settings"]
