"""
Generic registry for named strategy builders.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any, Callable, Generic, Iterable, TypeVar

from .exceptions import InvalidOperatorError

T = TypeVar("T")


def suggest_names(name: str, options: list[str]) -> list[str]:
    if not name or not options:
        return []
    lookup = {option.lower(): option for option in options}
    matches = get_close_matches(name.lower(), lookup.keys(), n=3, cutoff=0.6)
    return [lookup[match] for match in matches]


class Registry(Generic[T]):
    """
    Registry of items keyed by lower-case name.

    ``get`` raises InvalidOperatorError for unknown names, with close matches
    as the suggestion. Supports usage as a decorator.
    """

    def __init__(self, name: str = "Registry") -> None:
        self._name = name
        self._items: dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        """
        Register an item with the given key.

        Args:
            key: The unique name for the item.
            item: The item to register. If None, returns a decorator.
            override: If True, overwrite existing key. If False, raise ValueError on duplicate.
        """
        key = key.lower()

        def _do_register(obj: T) -> T:
            if key in self._items and not override:
                raise ValueError(f"Key '{key}' already exists in registry '{self._name}'")
            self._items[key] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def get(self, key: str, default: Any = ...) -> T:
        lookup = key.lower()
        if lookup not in self._items:
            if default is not ...:
                return default
            options = self.list()
            raise InvalidOperatorError(self._name, key, available=options, matches=suggest_names(key, options))
        return self._items[lookup]

    def list(self) -> list[str]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())

    def __contains__(self, key: str) -> bool:
        return key.lower() in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterable[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry", "suggest_names"]
