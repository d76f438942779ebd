"""Name-keyed registries that build objects at a position."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from fighterlite.sprite import Vec2

T = TypeVar("T")

Creator = Callable[[Vec2, str], T]


class Factory(Generic[T]):
    """Maps a short name to a function that builds an object."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    def register(self, name: str, creator: Creator) -> bool:
        """Register a creator; an existing name keeps its first creator."""
        self._creators.setdefault(name, creator)
        return True

    def create(self, name: str, pos: Vec2) -> T | None:
        """Build the named object at pos, or return None for unknown names."""
        creator = self._creators.get(name)
        if creator is None:
            return None
        return creator(pos, name)

    def __contains__(self, name: object) -> bool:
        return name in self._creators