"""Integration recipes: the patches the re-entrant pass applies per configuration.

Each step targets one file and lists alternative anchors for the same
insertion.  Every insertion is guarded, so a freshly generated project (which
already contains all of them) comes back as "already present", while an older
or hand-edited project gets whatever is missing.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..catalog.models import FileKind
from ..config import Architecture, Feature, Module, ScaffoldConfig
from .engine import AnchorPattern
from .matchers import AfterFirst, AfterLast, AfterLine, BeforeMatch, BlockTail

_LAST_IMPORT = r"^import .*;$"
_BINDING_INIT = r"WidgetsFlutterBinding\.ensureInitialized\(\);"
_MAIN_OPEN = r"void main\(\) async \{"
_DEPENDENCIES = r"^dependencies:[ \t]*$"


@dataclass(frozen=True)
class PatchStep:
    """One insertion, with the anchors to try in order."""

    target: FileKind
    anchors: tuple[AnchorPattern, ...]

    @property
    def name(self) -> str:
        return self.anchors[0].name


def plan_patches(config: ScaffoldConfig) -> list[PatchStep]:
    """Ordered patch steps for *config*."""
    steps = _showcase_steps() + _observability_steps()
    if config.has_module(Module.NETWORK_LAYER):
        steps += _network_steps(config)
    if config.has_module(Module.PUSH_NOTIFICATION):
        steps += _push_steps(config)
    if config.has_module(Module.LOCALIZATION):
        steps += _localization_steps()
    return steps


# ---------------------------------------------------------------------------
# Step builders
# ---------------------------------------------------------------------------


def _import(name: str, target: FileKind, line: str, guard: str) -> PatchStep:
    return PatchStep(
        target,
        (
            AnchorPattern(
                name=name,
                target=target,
                search=AfterLast(_LAST_IMPORT),
                insertion="\n" + line,
                guard=guard,
                hint=f"Add `{line}` to {target.path}",
            ),
        ),
    )


def _main_statement(name: str, statements: str, guard: str, hint: str) -> PatchStep:
    """Statements placed right after binding initialisation, else first in main()."""
    after_binding = "\n\n" + statements
    first_in_main = "\n" + "\n".join(
        f"  {line}" if line else line for line in statements.split("\n")
    )
    return PatchStep(
        FileKind.ENTRYPOINT,
        (
            AnchorPattern(name, FileKind.ENTRYPOINT, AfterFirst(_BINDING_INIT),
                          after_binding, guard, hint),
            AnchorPattern(name, FileKind.ENTRYPOINT, AfterFirst(_MAIN_OPEN),
                          first_in_main, guard, hint),
        ),
    )


def _dependency(name: str, entry: str) -> PatchStep:
    package = entry.split(":", 1)[0]
    return PatchStep(
        FileKind.MANIFEST,
        (
            AnchorPattern(
                name=name,
                target=FileKind.MANIFEST,
                search=AfterLine(_DEPENDENCIES),
                insertion=f"  {entry}\n",
                guard=rf"^  {package}:",
                hint=f"Add `{entry}` under `dependencies:` in pubspec.yaml",
            ),
        ),
    )


def _showcase_steps() -> list[PatchStep]:
    guard = r"'/showcase'"
    hint = "Register a '/showcase' route pointing at ShowcaseScreen in lib/app/app.dart"
    app = FileKind.APP_WIDGET
    route = PatchStep(
        app,
        (
            AnchorPattern(
                "showcase_route", app, BlockTail(r"\broutes:\s*\{", "{}"),
                "\n'/showcase': (context) => const ShowcaseScreen(),", guard, hint,
            ),
            AnchorPattern(
                "showcase_route", app, BlockTail(r"\bgetPages:\s*\[", "[]"),
                "\nGetPage(name: '/showcase', page: () => const ShowcaseScreen()),",
                guard, hint,
            ),
            AnchorPattern(
                "showcase_route", app,
                BeforeMatch(r"^\s*default:", after=r"onGenerateRoute:"),
                "case '/showcase':\n"
                "  return MaterialPageRoute(builder: (_) => const ShowcaseScreen());\n",
                guard, hint,
            ),
        ),
    )
    constant = PatchStep(
        FileKind.ROUTE_CONSTANTS,
        (
            AnchorPattern(
                "showcase_route_constant",
                FileKind.ROUTE_CONSTANTS,
                AfterLast(r"static const String \w+ = .*?;"),
                "\nstatic const String showcase = '/showcase';",
                r"static const String showcase\b",
                "Add `static const String showcase = '/showcase';` to RouteConstants",
            ),
        ),
    )
    return [
        _import(
            "showcase_import", app,
            "import 'package:{{ project_name }}/app/app_showcase.dart';",
            r"app/app_showcase\.dart",
        ),
        route,
        constant,
    ]


def _observability_steps() -> list[PatchStep]:
    return [
        _import(
            "observability_import", FileKind.ENTRYPOINT,
            "import 'package:{{ project_name }}/core/utils/state_management_observability.dart';",
            r"core/utils/state_management_observability\.dart",
        ),
        _main_statement(
            "observability_setup",
            "// Setup state management observability\nsetupStateObservability();",
            r"setupStateObservability\(\);",
            "Call setupStateObservability() at the start of main()",
        ),
    ]


def _network_steps(config: ScaffoldConfig) -> list[PatchStep]:
    steps = [
        _dependency("network_dependency_dio", "dio: ^5.3.3"),
        _dependency("network_dependency_connectivity", "connectivity_plus: ^6.0.0"),
        _dependency(
            "network_dependency_checker", "internet_connection_checker: ^3.0.1"
        ),
        _import(
            "network_import_connectivity", FileKind.ENTRYPOINT,
            "import 'package:{{ project_name }}/core/network/services/connectivity_service.dart';",
            r"core/network/services/connectivity_service\.dart",
        ),
        _import(
            "network_import_info", FileKind.ENTRYPOINT,
            "import 'package:{{ project_name }}/core/network/network_info.dart';",
            r"core/network/network_info\.dart",
        ),
        _import(
            "network_import_checker", FileKind.ENTRYPOINT,
            "import 'package:internet_connection_checker/internet_connection_checker.dart';",
            r"internet_connection_checker/internet_connection_checker\.dart",
        ),
        _main_statement(
            "network_init",
            "// Initialize network services\n"
            "final connectivityService = ConnectivityService();\n"
            "final networkInfo = NetworkInfoImpl(InternetConnectionChecker());",
            r"ConnectivityService\(\)",
            "Create ConnectivityService and NetworkInfoImpl at the start of main()",
        ),
    ]
    if config.architecture is Architecture.CLEAN:
        steps += [
            _import(
                "network_di_import", FileKind.INJECTION,
                "import 'package:{{ project_name }}/core/di/network_module.dart';",
                r"core/di/network_module\.dart",
            ),
            PatchStep(
                FileKind.INJECTION,
                (
                    AnchorPattern(
                        "network_di_registration",
                        FileKind.INJECTION,
                        AfterFirst(r"configureDependencies\(\) async \{"),
                        "\n  registerNetworkDependencies(sl);",
                        r"registerNetworkDependencies\(sl\)",
                        "Call registerNetworkDependencies(sl) from configureDependencies()",
                    ),
                ),
            ),
        ]
    return steps


def _push_steps(config: ScaffoldConfig) -> list[PatchStep]:
    steps = [
        _dependency("push_dependency_core", "firebase_core: ^2.15.0"),
        _dependency("push_dependency_messaging", "firebase_messaging: ^14.6.5"),
        _import(
            "push_import_handler", FileKind.ENTRYPOINT,
            "import 'package:{{ project_name }}/core/notifications/notification_handler.dart';",
            r"core/notifications/notification_handler\.dart",
        ),
    ]
    # Authentication already initialises Firebase; only the handler is added then.
    if not config.has_feature(Feature.AUTHENTICATION):
        steps += [
            _import(
                "push_import_firebase", FileKind.ENTRYPOINT,
                "import 'package:firebase_core/firebase_core.dart';",
                r"firebase_core/firebase_core\.dart",
            ),
            _main_statement(
                "push_firebase_init",
                "// Initialize Firebase\nawait Firebase.initializeApp();",
                r"Firebase\.initializeApp\(",
                "Call `await Firebase.initializeApp();` in main()",
            ),
        ]
    steps.append(
        PatchStep(
            FileKind.ENTRYPOINT,
            (
                AnchorPattern(
                    "push_handler_init",
                    FileKind.ENTRYPOINT,
                    AfterFirst(r"await Firebase\.initializeApp\([^;]*\);"),
                    "\n\n// Initialize notification services\n"
                    "await notificationHandler.initialize();",
                    r"notificationHandler\.initialize\(\)",
                    "Call `await notificationHandler.initialize();` after Firebase "
                    "initialisation in main()",
                ),
            ),
        )
    )
    return steps


def _localization_steps() -> list[PatchStep]:
    generate = PatchStep(
        FileKind.MANIFEST,
        (
            AnchorPattern(
                "localization_generate",
                FileKind.MANIFEST,
                AfterLine(r"^flutter:[ \t]*$"),
                "  generate: true\n",
                r"^\s+generate:\s*true\b",
                "Set `generate: true` in the `flutter:` section of pubspec.yaml",
            ),
        ),
    )
    return [
        _dependency("localization_dependency_easy", "easy_localization: ^3.0.3"),
        _dependency("localization_dependency_intl", "intl: any"),
        PatchStep(
            FileKind.MANIFEST,
            (
                AnchorPattern(
                    "localization_dependency_sdk",
                    FileKind.MANIFEST,
                    AfterLine(_DEPENDENCIES),
                    "  flutter_localizations:\n    sdk: flutter\n",
                    r"^  flutter_localizations:",
                    "Add `flutter_localizations: {sdk: flutter}` to pubspec.yaml",
                ),
            ),
        ),
        generate,
    ]
