"""Walker registries with layered fallback."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from estreewalk.ast.base import Node

Continuation = Callable[..., None]
WalkFunc = Callable[["Node", Any, Continuation], None]


class Registry(Mapping[str, WalkFunc]):
    """Read-only mapping from node type or category name to its walker.

    Types missing from this registry are looked up in ``base``, so derived
    registries can be stacked any number of levels deep.
    """

    def __init__(
        self,
        walkers: Mapping[str, WalkFunc] | None = None,
        base: Mapping[str, WalkFunc] | None = None,
    ) -> None:
        self._walkers = dict(walkers or {})
        self.base = base

    def __getitem__(self, type_name: str) -> WalkFunc:
        if type_name in self._walkers:
            return self._walkers[type_name]
        if self.base is not None:
            return self.base[type_name]
        raise KeyError(type_name)

    def __iter__(self) -> Iterator[str]:
        yield from self._walkers
        if self.base is not None:
            for type_name in self.base:
                if type_name not in self._walkers:
                    yield type_name

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Registry({len(self._walkers)} walkers, base={self.base is not None})"

    def own_types(self) -> frozenset[str]:
        """Types defined at this level, ignoring the base."""
        return frozenset(self._walkers)

    def derive(self, overrides: Mapping[str, WalkFunc]) -> Registry:
        """Layer ``overrides`` on top of this registry."""
        return Registry(overrides, self)


def make(
    overrides: Mapping[str, WalkFunc] | None,
    base: Mapping[str, WalkFunc] | None = None,
) -> Registry:
    """Create a custom walker registry.

    Types missing from ``overrides`` fall back to ``base``, which defaults to
    the standard grammar registry.
    """
    if base is None:
        from estreewalk.walk.base import BASE

        base = BASE
    return Registry(overrides, base)
