"""Fake environment variable backend for tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Env:
    """A fixed set of environment variables."""

    items: Mapping[str, str] = field(default_factory=dict)

    def getenv(self, key: str) -> str:
        """Return the value of ``key``, or an empty string if it is unset."""
        return self.items.get(key, "")


EMPTY = Env()


def pairs(*args: str) -> Env:
    """Build an Env from alternating keys and values."""
    if len(args) % 2:
        raise ValueError(f"{len(args)} items in environment are not even")
    return Env(dict(zip(args[::2], args[1::2])))