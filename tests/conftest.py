# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

ENV_KEY_PREFIX = "PHC_TOKEN_"
DOT_ENV_PATH_DOTTED = "phc_token.config.settings.DOT_ENV_PATH"
HERE = Path(__file__).parent


@pytest.fixture(scope="function", autouse=True)
def reset_env_and_args(tmp_path: Path) -> Generator[None, None, None]:
    """Clear the package's environment variables and command line."""
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [str(HERE / "conftest.py")]
    with patch(DOT_ENV_PATH_DOTTED, tmp_path / ".env"):
        yield
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
