"""Fragment catalog: a validated, read-only table of fragments.

The uniqueness invariant -- no two fragments share ``(axis, key, target)`` --
is checked once, when the catalog is built, so a corrupted table fails fast
instead of silently producing wrong output later.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Optional

from ..errors import CatalogError, DuplicateFragment
from .layouts import layout_for
from .models import AxisKind, CatalogStats, FileKind, Fragment, Identity


class FragmentCatalog:
    """Indexed collection of fragments.

    Catalog order (the order fragments were supplied in) is preserved and is
    used to break ties between fragments with equal ``order``.
    """

    def __init__(self, fragments: Iterable[Fragment]) -> None:
        self._fragments: list[Fragment] = []
        self._index: dict[Identity, Fragment] = {}
        self._position: dict[Identity, int] = {}
        self._by_key: dict[tuple[AxisKind, str], list[Fragment]] = {}

        for frag in fragments:
            identity = frag.identity
            if identity in self._index:
                raise DuplicateFragment(*identity)
            _check_shape(frag)
            self._position[identity] = len(self._fragments)
            self._fragments.append(frag)
            self._index[identity] = frag
            self._by_key.setdefault((frag.axis, frag.key), []).append(frag)

    # -- Lookup ------------------------------------------------------------

    def lookup(self, axis: AxisKind, key: str, target: FileKind) -> Optional[Fragment]:
        """Return the unique fragment for ``(axis, key, target)`` or ``None``."""
        return self._index.get((axis, key, target))

    def fragments_for(self, axis: AxisKind, key: str) -> list[Fragment]:
        """All fragments of one axis value, in catalog order."""
        return list(self._by_key.get((axis, key), ()))

    def compound_fragments(self) -> list[Fragment]:
        return [f for f in self._fragments if f.axis is AxisKind.COMPOUND]

    def core_fragments(self) -> list[Fragment]:
        return [f for f in self._fragments if f.axis is AxisKind.CORE]

    def position(self, frag: Fragment) -> int:
        """Catalog position of *frag*, used as a stable tie-breaker."""
        return self._position[frag.identity]

    def stats(self) -> CatalogStats:
        stats = CatalogStats()
        for frag in self._fragments:
            stats.per_axis[frag.axis] = stats.per_axis.get(frag.axis, 0) + 1
            stats.per_target[frag.target] = stats.per_target.get(frag.target, 0) + 1
        return stats

    # -- Container protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __contains__(self, identity: object) -> bool:
        return identity in self._index


def _check_shape(frag: Fragment) -> None:
    """Reject entries that could never be selected correctly."""
    if frag.axis is AxisKind.COMPOUND and not frag.requires:
        raise CatalogError(
            f"Compound fragment '{frag.key}' for {frag.target.value} has no predicate"
        )
    if frag.axis is not AxisKind.COMPOUND and (frag.requires or frag.suppresses):
        raise CatalogError(
            f"Only compound fragments may carry predicates or suppressions "
            f"({frag.axis.value}:{frag.key} for {frag.target.value})"
        )
    if not frag.parts:
        raise CatalogError(
            f"Fragment {frag.axis.value}:{frag.key} for {frag.target.value} has no parts"
        )
    layout = layout_for(frag.target)
    for part in frag.parts:
        if layout.block_for(part.section) is None:
            raise CatalogError(
                f"{frag.target.value} has no place for '{part.section.value}' parts "
                f"({frag.axis.value}:{frag.key})"
            )


@lru_cache(maxsize=1)
def default_catalog() -> FragmentCatalog:
    """The process-wide catalog built from the bundled tables (built once)."""
    from .tables import ALL_FRAGMENTS

    return FragmentCatalog(ALL_FRAGMENTS)
