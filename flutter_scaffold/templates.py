"""Jinja2 rendering for fragment text and file frames.

Fragment parts and anchor insertions are inline templates rendered with
:meth:`TemplateRenderer.render_string`; file skeletons are ``.j2`` frames
loaded from the ``flutter_scaffold/frames/`` directory.  Undefined variables
raise instead of rendering as empty text, so a typo in a catalog entry fails
loudly.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Frame directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_FRAME_DIR = Path(__file__).parent / "frames"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders catalog text and file frames.

    Frames are discovered under a configurable directory.  Both frames and
    inline strings are rendered with a context built from the scaffold
    configuration (project name, axes, application ids).
    """

    def __init__(self, frame_dir: str | Path | None = None) -> None:
        if frame_dir is None:
            frame_dir = _DEFAULT_FRAME_DIR
        self.frame_dir = Path(frame_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.frame_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["pascal_case"] = _pascal_case_filter

    # -- Rendering ---------------------------------------------------------

    def render(self, frame_name: str, context: dict[str, Any]) -> str:
        """Render a frame (e.g. ``"main.dart.j2"``) with the provided context."""
        template = self.env.get_template(frame_name)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Text without any Jinja2 markup is returned unchanged, which keeps the
        common case (plain Dart or YAML) cheap.
        """
        if "{{" not in template_string and "{%" not in template_string:
            return template_string
        return self.env.from_string(template_string).render(**context)


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Shared renderer over the bundled frames."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word.capitalize() for word in parts if word)
