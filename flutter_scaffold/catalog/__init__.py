"""Fragment catalog -- the static table of generated-code fragments.

Quick usage::

    from flutter_scaffold.catalog import AxisKind, FileKind, default_catalog

    catalog = default_catalog()
    frag = catalog.lookup(AxisKind.MODULE, "Localization", FileKind.ENTRYPOINT)
"""

from flutter_scaffold.catalog.layouts import LAYOUTS, Block, Dedupe, Layout, layout_for
from flutter_scaffold.catalog.models import (
    AxisKind,
    CatalogStats,
    FileKind,
    Fragment,
    Identity,
    Part,
    Section,
    Term,
    fragment,
)
from flutter_scaffold.catalog.registry import FragmentCatalog, default_catalog

__all__ = [
    "AxisKind",
    "Block",
    "CatalogStats",
    "Dedupe",
    "FileKind",
    "Fragment",
    "FragmentCatalog",
    "Identity",
    "LAYOUTS",
    "Layout",
    "Part",
    "Section",
    "Term",
    "default_catalog",
    "fragment",
    "layout_for",
]
