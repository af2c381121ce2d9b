# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Parsing PHC strings.

The grammar is::

    $<id>[$<key>=<value>(,<key>=<value>)*][$<salt>[$<hash>]]

with identifiers in ``[a-z0-9-]``, keys in ``[A-Za-z0-9-]``, values, salt and
hash in ``[A-Za-z0-9/+.-]``. Salt and hash are unpadded standard base64.
"""

import logging
import re
from typing import Any, Dict, Optional

from ._encoding import b64decode
from .errors import MalformedEncoding, UnknownFunction, UnparsableToken
from .parameter import Parameter
from .registry import DEFAULT_REGISTRY, FunctionRegistry
from .token import Token

LOG = logging.getLogger(__name__)

_ID = r"[a-z0-9-]*"
# scrypt renders its cost factor as an upper case N
_KEY = r"[a-zA-Z0-9-]*"
_VALUE = r"[a-zA-Z0-9/+.-]*"
TOKEN_RE = re.compile(
    rf"\$(?P<id>{_ID})"
    rf"(?:\$(?P<params>{_KEY}={_VALUE}(?:,{_KEY}={_VALUE})*))?"
    rf"(?:\$(?P<salt>{_VALUE})(?:\$(?P<hash>{_VALUE}))?)?"
)


def _split_params(segment: Optional[str]) -> Dict[str, str]:
    raw: Dict[str, str] = {}
    if not segment:
        return raw
    for pair in segment.split(","):
        key, _, value = pair.partition("=")
        if key in raw:
            LOG.debug("Parameter %r given more than once, last one wins", key)
        raw[key] = value
    return raw


def _decode(text: Optional[str], segment: str) -> Optional[bytes]:
    if text is None:
        return None
    try:
        return b64decode(text)
    except ValueError as error:
        raise MalformedEncoding(segment) from error


def parse(text: str, registry: FunctionRegistry = DEFAULT_REGISTRY) -> Token:
    """Parse a PHC string.

    Unknown parameter keys are ignored and a repeated key keeps its last
    value.

    Parameters
    ----------
    text : str
        The PHC string.
    registry : FunctionRegistry, optional
        Where the function is looked up, by default all known functions.

    Returns
    -------
    Token
        The parsed token.

    Raises
    ------
    UnparsableToken
        If the text does not match the grammar.
    UnknownFunction
        If the function is not registered.
    InvalidParameterValue
        If a known parameter has an invalid value.
    MalformedEncoding
        If the salt or the hash is not valid base64.
    """
    match = TOKEN_RE.fullmatch(text)
    if match is None:
        raise UnparsableToken(text)
    function_id = match.group("id")
    function = registry.lookup(function_id)
    if function is None:
        raise UnknownFunction(function_id)
    params: Dict[Parameter, Any] = {}
    for key, value in _split_params(match.group("params")).items():
        param = function.get_parameter(key)
        if param is None:
            LOG.debug("Ignoring unknown parameter %r for %s", key, function_id)
            continue
        params[param] = param.validate(value)
    salt = _decode(match.group("salt"), "salt")
    hashed = _decode(match.group("hash"), "hash")
    return Token(function, params, salt, hashed)


__all__ = ["parse", "TOKEN_RE"]
