"""Data model for the fragment catalog.

A ``Fragment`` is a static chunk of generated Dart/YAML text tied to one axis
value and one target file.  Its text is split into ``Part`` objects, one per
``Section`` of the target file (imports, statements, manifest entries...), so a
single axis value contributes to one file through exactly one catalog entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class AxisKind(str, Enum):
    """Configuration dimension a fragment is keyed on."""
    CORE = "core"
    COMPOUND = "compound"
    ARCHITECTURE = "architecture"
    STATE_MANAGEMENT = "state_management"
    FEATURE = "feature"
    MODULE = "module"


class FileKind(str, Enum):
    """Files of the generated project that the catalog can produce."""
    ENTRYPOINT = "entrypoint"
    MANIFEST = "manifest"
    APP_WIDGET = "app_widget"
    SHOWCASE_SCREEN = "showcase_screen"
    OBSERVABILITY = "observability"
    ROUTE_CONSTANTS = "route_constants"
    INJECTION = "injection"
    NETWORK_DI = "network_di"
    NETWORK_INFO = "network_info"
    CONNECTIVITY_SERVICE = "connectivity_service"
    NOTIFICATION_HANDLER = "notification_handler"
    APP_THEME = "app_theme"
    THEME_CONTROLLER = "theme_controller"
    LOCALIZATIONS = "localizations"
    LOCALE_CONTROLLER = "locale_controller"
    REDUX_STATE = "redux_state"
    LOCATOR = "locator"

    @property
    def path(self) -> str:
        """Path of the file relative to the generated project root."""
        return _FILE_PATHS[self]


_FILE_PATHS: dict[FileKind, str] = {
    FileKind.ENTRYPOINT: "lib/main.dart",
    FileKind.MANIFEST: "pubspec.yaml",
    FileKind.APP_WIDGET: "lib/app/app.dart",
    FileKind.SHOWCASE_SCREEN: "lib/app/app_showcase.dart",
    FileKind.OBSERVABILITY: "lib/core/utils/state_management_observability.dart",
    FileKind.ROUTE_CONSTANTS: "lib/core/routes/route_constants.dart",
    FileKind.INJECTION: "lib/core/di/injection.dart",
    FileKind.NETWORK_DI: "lib/core/di/network_module.dart",
    FileKind.NETWORK_INFO: "lib/core/network/network_info.dart",
    FileKind.CONNECTIVITY_SERVICE: "lib/core/network/services/connectivity_service.dart",
    FileKind.NOTIFICATION_HANDLER: "lib/core/notifications/notification_handler.dart",
    FileKind.APP_THEME: "lib/core/design_system/theme_extension/app_theme_extension.dart",
    FileKind.THEME_CONTROLLER: "lib/core/design_system/theme_extension/theme_controller.dart",
    FileKind.LOCALIZATIONS: "lib/core/localization/generated/app_localizations.dart",
    FileKind.LOCALE_CONTROLLER: "lib/core/localization/locale_controller.dart",
    FileKind.REDUX_STATE: "lib/core/redux/app_state.dart",
    FileKind.LOCATOR: "lib/app/app.locator.dart",
}


class Section(str, Enum):
    """Region of a target file a fragment part is placed into."""
    IMPORT = "import"
    BODY = "body"
    EPILOGUE = "epilogue"
    PROVIDER = "provider"
    PROPERTY = "property"
    CHILD = "child"
    WRAPPER = "wrapper"
    DEPENDENCY = "dependency"
    DEV_DEPENDENCY = "dev_dependency"
    ASSET = "asset"
    TRAILER = "trailer"


Identity = tuple[AxisKind, str, FileKind]
Term = tuple[AxisKind, str]


@dataclass(frozen=True)
class Part:
    """Text destined for one section of the target file."""

    section: Section
    text: str
    order: Optional[int] = None


@dataclass(frozen=True)
class Fragment:
    """A catalog entry: one axis value's contribution to one target file.

    Attributes:
        axis: Axis the fragment is keyed on.
        key: Value within the axis (or the compound rule name).
        target: File the fragment contributes to.
        parts: Section texts, Jinja2 templates rendered against the config.
        order: Default position of ordered parts; lower renders first.
        slot: Name of an exclusive slot.  At most one selected fragment per
            target may claim a given slot.
        requires: Compound predicate -- every term must be present in the
            configuration for the fragment to be active.
        suppresses: Identities removed from the selection while this
            fragment is active.
    """

    axis: AxisKind
    key: str
    target: FileKind
    parts: tuple[Part, ...]
    order: int = 50
    slot: Optional[str] = None
    requires: tuple[Term, ...] = ()
    suppresses: tuple[Identity, ...] = ()

    @property
    def identity(self) -> Identity:
        return (self.axis, self.key, self.target)

    @property
    def body(self) -> str:
        """All part texts joined, mostly useful for display and debugging."""
        return "\n".join(p.text for p in self.parts)

    def order_of(self, part: Part) -> int:
        return self.order if part.order is None else part.order

    def sections(self) -> set[Section]:
        return {p.section for p in self.parts}


def fragment(
    axis: AxisKind,
    key: str,
    target: FileKind,
    *,
    order: int = 50,
    slot: Optional[str] = None,
    requires: tuple[Term, ...] = (),
    suppresses: tuple[Identity, ...] = (),
    **sections: str | tuple[str, int],
) -> Fragment:
    """Build a ``Fragment`` from keyword sections.

    Each keyword names a ``Section`` value; the value is either the text or a
    ``(text, order)`` pair when that part needs its own position::

        fragment(AxisKind.MODULE, "Localization", FileKind.ENTRYPOINT,
                 order=10,
                 imports="import 'package:easy_localization/easy_localization.dart';",
                 body="  await EasyLocalization.ensureInitialized();")

    ``imports`` is accepted as an alias of ``import`` (a keyword in Python).
    """
    parts: list[Part] = []
    for name, value in sections.items():
        section = Section("import" if name == "imports" else name)
        if isinstance(value, tuple):
            text, part_order = value
            parts.append(Part(section, _strip(text), part_order))
        else:
            parts.append(Part(section, _strip(value)))
    return Fragment(
        axis=axis,
        key=key,
        target=target,
        parts=tuple(parts),
        order=order,
        slot=slot,
        requires=requires,
        suppresses=suppresses,
    )


def _strip(text: str) -> str:
    # Triple-quoted catalog text starts/ends with a newline; keep indentation.
    return text.strip("\n")


@dataclass
class CatalogStats:
    """Counts per axis, for the ``catalog`` CLI command."""

    per_axis: dict[AxisKind, int] = field(default_factory=dict)
    per_target: dict[FileKind, int] = field(default_factory=dict)
