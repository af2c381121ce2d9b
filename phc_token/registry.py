# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Lookup of password hashing functions by identifier."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .functions import ALL_FUNCTIONS, PHCFunction


class FunctionRegistry:
    """An immutable set of functions, keyed by their identifier."""

    def __init__(self, functions: Iterable[PHCFunction] = ()) -> None:
        by_id: Dict[str, PHCFunction] = {}
        for function in functions:
            if function.id in by_id:
                raise ValueError(f"Duplicate function id: {function.id!r}")
            by_id[function.id] = function
        self._by_id = MappingProxyType(by_id)

    def register(self, function: PHCFunction) -> "FunctionRegistry":
        """Get a registry that also holds ``function``.

        Parameters
        ----------
        function : PHCFunction
            The function to add.

        Returns
        -------
        FunctionRegistry
            A new registry, this one is left untouched.

        Raises
        ------
        ValueError
            If a function with the same id is already registered.
        """
        return FunctionRegistry((*self._by_id.values(), function))

    def lookup(self, function_id: str) -> Optional[PHCFunction]:
        """Get a function by its identifier.

        Parameters
        ----------
        function_id : str
            The identifier, e.g. ``argon2id``.

        Returns
        -------
        Optional[PHCFunction]
            The function, or None if not registered.
        """
        return self._by_id.get(function_id)

    def ids(self) -> Tuple[str, ...]:
        """Get the registered identifiers.

        Returns
        -------
        Tuple[str, ...]
            The identifiers, in registration order.
        """
        return tuple(self._by_id)

    def __contains__(self, function_id: object) -> bool:
        return function_id in self._by_id

    def __iter__(self) -> Iterator[PHCFunction]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


DEFAULT_REGISTRY = FunctionRegistry(ALL_FUNCTIONS)

__all__ = ["FunctionRegistry", "DEFAULT_REGISTRY"]
