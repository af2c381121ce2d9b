# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the scrypt function."""

import hashlib

import pytest

from phc_token import (
    SCRYPT,
    DerivationError,
    MissingParameter,
    ScryptParam,
    builder,
    parse,
)


class TestScrypt:
    """Test the scrypt function."""

    def test_rfc_vector(self) -> None:
        """Test the RFC 7914 vector with an empty password and salt."""
        token = (
            builder(SCRYPT)
            .with_salt(b"")
            .with_param(ScryptParam.N, 16)
            .with_param(ScryptParam.R, 1)
            .with_param(ScryptParam.P, 1)
            .hash("", 64)
        )
        assert token.hash == bytes.fromhex(
            "77d6576238657b203b19ca42c18a0497"
            "f16b4844e3074ae8dfdffa3fede21442"
            "fcd0069ded0948f8326a753a0fc81f17"
            "e8d3e0fb2e0d3628cf35e20c38d18906"
        )
        assert token.serialize().startswith("$scrypt$N=16,r=1,p=1$")

    def test_cost_used_as_is(self) -> None:
        """Test that N reaches the primitive unchanged."""
        params = {ScryptParam.N: 4, ScryptParam.R: 1, ScryptParam.P: 1}
        expected = hashlib.scrypt(
            b"password", salt=b"salt", n=4, r=1, p=1, dklen=64
        )
        assert SCRYPT.derive(params, b"salt", "password") == expected

    def test_round_trip(self) -> None:
        """Test parsing and validating a generated token."""
        token = (
            builder("scrypt")
            .with_random_salt(16)
            .with_param(ScryptParam.N, 4)
            .with_param(ScryptParam.R, 1)
            .with_param(ScryptParam.P, 1)
            .hash("password")
        )
        assert len(token.hash or b"") == SCRYPT.default_hash_length
        parsed = parse(str(token))
        assert parsed == token
        assert parsed.validate("password")
        assert not parsed.validate("Password")

    def test_cost_bounds(self) -> None:
        """Test the cost factor range."""
        assert ScryptParam.N.validate("31") == 31
        with pytest.raises(ValueError):
            ScryptParam.N.validate(32)
        with pytest.raises(ValueError):
            ScryptParam.N.validate(1)

    @pytest.mark.parametrize("cost", [3, 10, 31])
    def test_cost_not_a_power_of_two(self, cost: int) -> None:
        """Test that an in-range cost the primitive refuses fails cleanly."""
        params = {ScryptParam.N: cost, ScryptParam.R: 1, ScryptParam.P: 1}
        with pytest.raises(DerivationError):
            SCRYPT.derive(params, b"salt", "password")

    def test_memory_too_high(self) -> None:
        """Test that an excessive memory cost is refused."""
        params = {ScryptParam.N: 16, ScryptParam.R: 2**20, ScryptParam.P: 1}
        with pytest.raises(DerivationError):
            SCRYPT.derive(params, b"salt", "password")

    def test_missing_parameter(self) -> None:
        """Test that the block size is required."""
        params = {ScryptParam.N: 4, ScryptParam.P: 1}
        with pytest.raises(MissingParameter) as exc_info:
            SCRYPT.derive(params, b"salt", "password")
        assert exc_info.value.parameters == ["r"]
