"""Per-file layouts: how selected fragment parts are joined into a file.

A ``Layout`` names the Jinja2 frame (under ``flutter_scaffold/frames``) and
the blocks the frame expects.  Each block gathers the parts of one or more
sections, orders them, removes duplicates and joins them.  Blocks built from
``Section.WRAPPER`` are rendered last, with every other block available to the
wrapper text as a variable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import FileKind, Section


class Dedupe(str, Enum):
    """Duplicate-removal policy for a block."""
    NONE = "none"
    LINE = "line"   # identical non-blank lines collapse (imports, assets)
    KEY = "key"     # YAML entries collapse by package name (manifest)


@dataclass(frozen=True)
class Block:
    """One variable of a frame template."""

    name: str
    sections: tuple[Section, ...]
    ordered: bool = True
    dedupe: Dedupe = Dedupe.NONE
    separator: str = "\n"

    @property
    def is_wrapper(self) -> bool:
        return Section.WRAPPER in self.sections


@dataclass(frozen=True)
class Layout:
    """Join rule for one target file.

    Attributes:
        frame: Template name of the file skeleton.
        blocks: Blocks exposed to the frame, in evaluation order.
        required: Sections that must end up non-empty.
        mandatory: Whether the file is produced for every configuration.
    """

    frame: str
    blocks: tuple[Block, ...]
    required: tuple[Section, ...] = ()
    mandatory: bool = False

    def block_for(self, section: Section) -> Block | None:
        for block in self.blocks:
            if section in block.sections:
                return block
        return None


# Imports keep the order the resolver selected them in.
_IMPORTS = Block("imports", (Section.IMPORT,), ordered=False, dedupe=Dedupe.LINE)

# Support libraries: imports followed by top-level declarations.
_LIBRARY = Layout(
    frame="library.dart.j2",
    blocks=(_IMPORTS, Block("definitions", (Section.BODY,), separator="\n\n")),
    required=(Section.BODY,),
)


LAYOUTS: dict[FileKind, Layout] = {
    FileKind.ENTRYPOINT: Layout(
        frame="main.dart.j2",
        blocks=(
            _IMPORTS,
            Block("statements", (Section.BODY, Section.EPILOGUE), separator="\n\n"),
        ),
        required=(Section.BODY,),
        mandatory=True,
    ),
    FileKind.MANIFEST: Layout(
        frame="pubspec.yaml.j2",
        blocks=(
            Block("dependencies", (Section.DEPENDENCY,), dedupe=Dedupe.KEY),
            Block("dev_dependencies", (Section.DEV_DEPENDENCY,), dedupe=Dedupe.KEY),
            Block("assets", (Section.ASSET,), dedupe=Dedupe.LINE),
            Block("trailer", (Section.TRAILER,), separator="\n\n"),
        ),
        required=(Section.DEPENDENCY,),
        mandatory=True,
    ),
    FileKind.APP_WIDGET: Layout(
        frame="app.dart.j2",
        blocks=(
            _IMPORTS,
            Block("providers", (Section.PROVIDER,), dedupe=Dedupe.LINE),
            Block("properties", (Section.PROPERTY,)),
            Block("app_class", (Section.WRAPPER,)),
        ),
        required=(Section.WRAPPER,),
        mandatory=True,
    ),
    FileKind.SHOWCASE_SCREEN: Layout(
        frame="app_showcase.dart.j2",
        blocks=(
            _IMPORTS,
            Block("members", (Section.BODY,), separator="\n\n"),
            Block("children", (Section.CHILD,)),
        ),
        required=(Section.CHILD,),
        mandatory=True,
    ),
    FileKind.OBSERVABILITY: Layout(
        frame="state_management_observability.dart.j2",
        blocks=(
            _IMPORTS,
            Block("notes", (Section.BODY,)),
            Block("observer", (Section.WRAPPER,)),
        ),
        required=(Section.WRAPPER,),
        mandatory=True,
    ),
    FileKind.ROUTE_CONSTANTS: Layout(
        frame="route_constants.dart.j2",
        blocks=(Block("constants", (Section.BODY,), dedupe=Dedupe.LINE),),
        required=(Section.BODY,),
        mandatory=True,
    ),
    FileKind.INJECTION: Layout(
        frame="injection.dart.j2",
        blocks=(_IMPORTS, Block("registrations", (Section.BODY,))),
        required=(Section.BODY,),
    ),
    FileKind.NETWORK_DI: _LIBRARY,
    FileKind.NETWORK_INFO: _LIBRARY,
    FileKind.CONNECTIVITY_SERVICE: _LIBRARY,
    FileKind.NOTIFICATION_HANDLER: _LIBRARY,
    FileKind.APP_THEME: _LIBRARY,
    FileKind.THEME_CONTROLLER: _LIBRARY,
    FileKind.LOCALIZATIONS: _LIBRARY,
    FileKind.LOCALE_CONTROLLER: _LIBRARY,
    FileKind.REDUX_STATE: Layout(
        frame="app_state.dart.j2",
        blocks=(
            _IMPORTS,
            Block("fields", (Section.PROPERTY,), dedupe=Dedupe.LINE),
            Block("definitions", (Section.BODY,), separator="\n\n"),
        ),
        required=(Section.PROPERTY,),
    ),
    FileKind.LOCATOR: _LIBRARY,
}


def layout_for(target: FileKind) -> Layout:
    return LAYOUTS[target]
