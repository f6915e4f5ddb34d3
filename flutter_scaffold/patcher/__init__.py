"""Re-entrant patching of previously generated files.

Quick usage::

    from flutter_scaffold.patcher import plan_patches, patch_any

    for step in plan_patches(config):
        result = patch_any(text, step.anchors, config)
        if result.needs_manual_followup:
            print(result.hint)
"""

from flutter_scaffold.patcher.engine import (
    AnchorPattern,
    PatchReason,
    PatchResult,
    missing_target,
    patch,
    patch_any,
)
from flutter_scaffold.patcher.matchers import (
    AfterFirst,
    AfterLast,
    AfterLine,
    BeforeMatch,
    BlockTail,
    Location,
    Matcher,
)
from flutter_scaffold.patcher.recipes import PatchStep, plan_patches

__all__ = [
    "AfterFirst",
    "AfterLast",
    "AfterLine",
    "AnchorPattern",
    "BeforeMatch",
    "BlockTail",
    "Location",
    "Matcher",
    "PatchReason",
    "PatchResult",
    "PatchStep",
    "missing_target",
    "patch",
    "patch_any",
    "plan_patches",
]
