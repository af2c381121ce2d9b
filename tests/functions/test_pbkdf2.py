# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the PBKDF2 function."""

import base64

import pytest

from phc_token import (
    PBKDF2_FUNCTION,
    MissingParameter,
    Pbkdf2Algorithm,
    Pbkdf2Param,
    builder,
    parse,
)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


class TestPbkdf2KnownAnswers:
    """RFC 6070 vectors."""

    @pytest.mark.parametrize(
        "password,salt,iterations,length,expected",
        [
            (
                "password",
                b"salt",
                1,
                20,
                "0c60c80f961f0e71f3a9b524af6012062fe037a6",
            ),
            (
                "password",
                b"salt",
                2,
                20,
                "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957",
            ),
            (
                "password",
                b"salt",
                4096,
                20,
                "4b007901b765489abead49d926f721d065a429c1",
            ),
            (
                "passwordPASSWORDpassword",
                b"saltSALTsaltSALTsaltSALTsaltSALTsalt",
                4096,
                25,
                "3d2eec4fe41c849b80c8d83662c0e44a8b291a964cf2f07038",
            ),
            (
                "pass\0word",
                b"sa\0lt",
                4096,
                16,
                "56fa6aa75548099dcc37d7f03425e0c3",
            ),
        ],
    )
    def test_hmac_sha1(
        self,
        password: str,
        salt: bytes,
        iterations: int,
        length: int,
        expected: str,
    ) -> None:
        """Test the hash and its serialized form."""
        token = (
            builder(PBKDF2_FUNCTION)
            .with_salt(salt)
            .with_param(Pbkdf2Param.ALG, Pbkdf2Algorithm.HMAC_SHA1)
            .with_param(Pbkdf2Param.C, iterations)
            .with_param(Pbkdf2Param.LENGTH, length)
            .hash(password)
        )
        expected_hash = bytes.fromhex(expected)
        assert token.hash == expected_hash
        assert token.serialize() == (
            f"$pbkdf2$alg=HmacSHA1,c={iterations}"
            f"${_b64(salt)}${_b64(expected_hash)}"
        )

    def test_explicit_length(self) -> None:
        """Test the length given to hash() without the length parameter."""
        token = (
            builder("pbkdf2")
            .with_salt(b"salt")
            .with_param(Pbkdf2Param.ALG, "HmacSHA1")
            .with_param(Pbkdf2Param.C, 1)
            .hash("password", 20)
        )
        assert token.hash == bytes.fromhex(
            "0c60c80f961f0e71f3a9b524af6012062fe037a6"
        )


class TestPbkdf2:
    """Test the PBKDF2 function."""

    @pytest.mark.parametrize("algorithm", list(Pbkdf2Algorithm))
    def test_every_algorithm(self, algorithm: Pbkdf2Algorithm) -> None:
        """Test every HMAC variant round trips and validates."""
        token = (
            builder(PBKDF2_FUNCTION)
            .with_random_salt(16)
            .with_param(Pbkdf2Param.ALG, algorithm)
            .with_param(Pbkdf2Param.C, 16)
            .hash("password")
        )
        text = token.serialize()
        assert text.startswith(f"$pbkdf2$alg={algorithm.value},c=16$")
        assert len(token.hash or b"") == PBKDF2_FUNCTION.default_hash_length
        parsed = parse(text)
        assert parsed == token
        assert parsed.validate("password")
        assert not parsed.validate("passwore")

    def test_default_lengths(self) -> None:
        """Test the default salt and hash lengths."""
        token = (
            builder(PBKDF2_FUNCTION)
            .with_random_salt()
            .with_param(Pbkdf2Param.ALG, Pbkdf2Algorithm.HMAC_SHA256)
            .with_param(Pbkdf2Param.C, 1)
            .hash("password")
        )
        assert len(token.salt or b"") == 128
        assert len(token.hash or b"") == 64

    def test_length_parameter_not_rendered(self) -> None:
        """Test that the internal length parameter stays out of the text."""
        token = (
            builder(PBKDF2_FUNCTION)
            .with_salt(b"salt")
            .with_param(Pbkdf2Param.ALG, Pbkdf2Algorithm.HMAC_SHA1)
            .with_param(Pbkdf2Param.C, 1)
            .with_param(Pbkdf2Param.LENGTH, 32)
            .hash("password")
        )
        assert Pbkdf2Param.LENGTH not in token.params
        assert len(token.hash or b"") == 32
        assert parse(token.serialize()) == token

    @pytest.mark.parametrize(
        "params",
        [
            {Pbkdf2Param.C: 1},
            {Pbkdf2Param.ALG: Pbkdf2Algorithm.HMAC_SHA1},
            {},
        ],
    )
    def test_missing_parameters(self, params: dict) -> None:
        """Test that the algorithm and the iterations are required."""
        with pytest.raises(MissingParameter):
            PBKDF2_FUNCTION.derive(params, b"salt", "password")
