"""Flutter project scaffolder.

Composes a Flutter project from four independent choices (architecture,
state-management library, features and infrastructure modules) out of a
static catalog of code fragments, then runs an idempotent patch pass that
can also bring an older project up to date.

Quick usage::

    import asyncio
    from flutter_scaffold import ScaffoldConfig, ScaffoldGenerator

    config = ScaffoldConfig.create(project_name="shop", state_management="Bloc")
    report = asyncio.run(ScaffoldGenerator(config).generate("./output"))
"""

from flutter_scaffold.composer import Composition, FileSpec, compose, compose_all
from flutter_scaffold.config import (
    Architecture,
    Feature,
    Module,
    ScaffoldConfig,
    Settings,
    StateManagement,
)
from flutter_scaffold.errors import (
    AmbiguousSelection,
    CatalogError,
    DuplicateFragment,
    EmptyComposition,
    InvalidConfiguration,
    MalformedAnchor,
    ScaffoldError,
)
from flutter_scaffold.generator import GenerationReport, ScaffoldGenerator
from flutter_scaffold.materializer import Materializer, WriteKind, WriteOp, WriteOutcome, WriteStatus
from flutter_scaffold.resolver import SelectionSet, resolve

__version__ = "0.1.0"

__all__ = [
    "AmbiguousSelection",
    "Architecture",
    "CatalogError",
    "Composition",
    "DuplicateFragment",
    "EmptyComposition",
    "Feature",
    "FileSpec",
    "GenerationReport",
    "InvalidConfiguration",
    "MalformedAnchor",
    "Materializer",
    "Module",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldGenerator",
    "SelectionSet",
    "Settings",
    "StateManagement",
    "WriteKind",
    "WriteOp",
    "WriteOutcome",
    "WriteStatus",
    "compose",
    "compose_all",
    "resolve",
]
