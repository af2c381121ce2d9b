# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Test phc_token.config._common."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc

import os
import sys

# noinspection PyProtectedMember
from phc_token.config._common import ENV_PREFIX, get_value


def test_get_value() -> None:
    """Test get_value."""
    os.environ[f"{ENV_PREFIX}TEST"] = "test"
    assert get_value("--test", "TEST", str, "default") == "test"

    os.environ[f"{ENV_PREFIX}TEST"] = "1"
    assert get_value("--test", "TEST", bool, False) is True

    os.environ[f"{ENV_PREFIX}TEST"] = "off"
    assert get_value("--test", "TEST", bool, True) is False


def test_get_value_no_env() -> None:
    """Test get_value with no environment variable."""
    assert get_value("--test", "TEST", str, "default") == "default"

    assert get_value("--test", "TEST", bool, False) is False

    assert get_value("--test", "TEST", int, 0) == 0

    os.environ[f"{ENV_PREFIX}TEST"] = ""
    assert get_value("--test", "TEST", str, "default") == "default"


def test_get_value_from_argv() -> None:
    """Test that the command line wins over the environment."""
    os.environ[f"{ENV_PREFIX}ARGON2_TIME_COST"] = "3"
    sys.argv = ["test", "--argon2-time-cost", "4"]
    assert get_value("--argon2-time-cost", "ARGON2_TIME_COST", int, 2) == 4

    sys.argv = ["test", "--argon2-time-cost"]
    assert get_value("--argon2-time-cost", "ARGON2_TIME_COST", int, 2) == 3

    sys.argv = ["test", "--no-flag"]
    assert get_value("--flag", "FLAG", bool, True) is False
    sys.argv = ["test", "--flag"]
    assert get_value("--flag", "FLAG", bool, False) is True


def test_get_value_cast_error() -> None:
    """Test that a value that can not be cast falls back."""
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "twelve"
    assert get_value("--bcrypt-cost", "BCRYPT_COST", int, 12) == 12
