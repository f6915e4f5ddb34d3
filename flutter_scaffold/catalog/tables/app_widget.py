"""Fragments for ``lib/app/app.dart``.

Every state-management value owns the exclusive ``app_class`` slot with a
wrapper that places the collected ``providers`` and ``properties`` inside its
own widget tree.  Theme and locale bindings differ per library, so they are
cross-axis rules generated from the binding tables below.
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.APP_WIDGET

_PROVIDER_APP = """
/// Main App widget that configures the application using Provider.
class App extends StatelessWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context) {
    return MultiProvider(
      providers: [
{% if providers %}
{{ providers | indent(8, true) }}
{% endif %}
      ],
      child: Builder(
        builder: (context) {
          return MaterialApp(
            title: '{{ project_name | pascal_case }}',
            debugShowCheckedModeBanner: false,
{{ properties | indent(12, true) }}
            initialRoute: RouteConstants.home,
            routes: {
              RouteConstants.home: (context) => const ShowcaseScreen(),
            },
          );
        },
      ),
    );
  }
}
"""

_RIVERPOD_APP = """
/// Main App widget that configures the application using Riverpod.
class App extends ConsumerWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    return MaterialApp(
      title: '{{ project_name | pascal_case }}',
      debugShowCheckedModeBanner: false,
{{ properties | indent(6, true) }}
      initialRoute: RouteConstants.home,
      routes: {
        RouteConstants.home: (context) => const ShowcaseScreen(),
      },
    );
  }
}
"""

_BLOC_APP = """
/// Main App widget that configures the application using BLoC.
class App extends StatelessWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context) {
    return MultiBlocProvider(
      providers: [
{% if providers %}
{{ providers | indent(8, true) }}
{% endif %}
      ],
      child: Builder(
        builder: (context) {
          return MaterialApp(
            title: '{{ project_name | pascal_case }}',
            debugShowCheckedModeBanner: false,
{{ properties | indent(12, true) }}
            initialRoute: RouteConstants.home,
            routes: {
              RouteConstants.home: (context) => const ShowcaseScreen(),
            },
          );
        },
      ),
    );
  }
}
"""

_GETX_APP = """
/// Main App widget that configures the application using GetX.
class App extends StatelessWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context) {
    return GetMaterialApp(
      title: '{{ project_name | pascal_case }}',
      debugShowCheckedModeBanner: false,
{{ properties | indent(6, true) }}
      initialRoute: RouteConstants.home,
      getPages: [
        GetPage(name: RouteConstants.home, page: () => const ShowcaseScreen()),
      ],
    );
  }
}
"""

_MOBX_APP = """
/// Main App widget that configures the application using MobX.
class App extends StatelessWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context) {
    return Observer(
      builder: (_) {
        return MaterialApp(
          title: '{{ project_name | pascal_case }}',
          debugShowCheckedModeBanner: false,
{{ properties | indent(10, true) }}
          initialRoute: RouteConstants.home,
          routes: {
            RouteConstants.home: (context) => const ShowcaseScreen(),
          },
        );
      },
    );
  }
}
"""

_REDUX_APP = """
/// Main App widget that configures the application using Redux.
class App extends StatelessWidget {
  /// Creates a new App instance.
  const App({super.key});

  @override
  Widget build(BuildContext context) {
    return StoreConnector<AppState, AppState>(
      converter: (store) => store.state,
      builder: (context, state) {
        return MaterialApp(
          title: '{{ project_name | pascal_case }}',
          debugShowCheckedModeBanner: false,
{{ properties | indent(10, true) }}
          initialRoute: RouteConstants.home,
          onGenerateRoute: (settings) {
            switch (settings.name) {
              case RouteConstants.home:
                return MaterialPageRoute(builder: (_) => const ShowcaseScreen());
              default:
                return MaterialPageRoute(builder: (_) => const ShowcaseScreen());
            }
          },
        );
      },
    );
  }
}
"""

# state management -> (imports, wrapper)
_APP_CLASSES = {
    "Provider": ("import 'package:provider/provider.dart';", _PROVIDER_APP),
    "Riverpod": ("import 'package:flutter_riverpod/flutter_riverpod.dart';", _RIVERPOD_APP),
    "Bloc": ("import 'package:flutter_bloc/flutter_bloc.dart';", _BLOC_APP),
    "GetX": ("import 'package:get/get.dart';", _GETX_APP),
    "MobX": ("import 'package:flutter_mobx/flutter_mobx.dart';", _MOBX_APP),
    "Redux": (
        "import 'package:flutter_redux/flutter_redux.dart';\n"
        "import 'package:{{ project_name }}/core/redux/app_state.dart';",
        _REDUX_APP,
    ),
}

_THEME_DIR = "package:{{ project_name }}/core/design_system/theme_extension"
_LOCALE_DIR = "package:{{ project_name }}/core/localization"

# state management -> (import, provider entry, themeMode property)
_THEME_BINDINGS = {
    "Provider": (
        f"import '{_THEME_DIR}/theme_controller.dart';",
        "ChangeNotifierProvider(create: (_) => ThemeProvider()),",
        "themeMode: Provider.of<ThemeProvider>(context).themeMode,",
    ),
    "Riverpod": (
        f"import '{_THEME_DIR}/theme_controller.dart';",
        None,
        "themeMode: ref.watch(flutterThemeModeProvider),",
    ),
    "Bloc": (
        f"import '{_THEME_DIR}/theme_controller.dart';",
        "BlocProvider(create: (_) => ThemeCubit()),",
        "themeMode: context.watch<ThemeCubit>().state.themeMode.toThemeMode(),",
    ),
    "GetX": (
        f"import '{_THEME_DIR}/theme_controller.dart';",
        None,
        "themeMode: Get.find<ThemeController>().themeMode,",
    ),
    "MobX": (
        f"import '{_THEME_DIR}/theme_controller.dart';",
        None,
        "themeMode: themeStore.flutterThemeMode,",
    ),
    "Redux": (
        None,
        None,
        "themeMode: state.themeState.flutterThemeMode,",
    ),
}

# state management -> (import, provider entry, locale property)
_LOCALE_BINDINGS = {
    "Provider": (
        f"import '{_LOCALE_DIR}/locale_controller.dart';",
        "ChangeNotifierProvider(create: (_) => LocalizationProvider()),",
        "locale: Provider.of<LocalizationProvider>(context).locale,",
    ),
    "Riverpod": (
        f"import '{_LOCALE_DIR}/locale_controller.dart';",
        None,
        "locale: ref.watch(localeProvider),",
    ),
    "Bloc": (
        f"import '{_LOCALE_DIR}/locale_controller.dart';",
        "BlocProvider(create: (_) => LocaleBloc()),",
        "locale: context.watch<LocaleBloc>().state.locale,",
    ),
    "GetX": (
        f"import '{_LOCALE_DIR}/locale_controller.dart';",
        None,
        "locale: Get.find<LocalizationController>().locale,",
    ),
    "MobX": (
        f"import '{_LOCALE_DIR}/locale_controller.dart';",
        None,
        "locale: localizationStore.locale,",
    ),
    "Redux": (
        None,
        None,
        "locale: state.localeState.locale,",
    ),
}


def _binding_rules(module: str, bindings: dict, order: int) -> list:
    rules = []
    for state, (imports, provider, prop) in bindings.items():
        sections = {"property": prop}
        if imports:
            sections["imports"] = imports
        if provider:
            sections["provider"] = provider
        rules.append(
            fragment(
                A.COMPOUND, f"{state}+{module}", T,
                order=order,
                requires=((A.STATE_MANAGEMENT, state), (A.MODULE, module)),
                **sections,
            )
        )
    return rules


FRAGMENTS = [
    # -- Core ---------------------------------------------------------------
    fragment(
        A.CORE, "app", T,
        order=0,
        imports="""
import 'package:flutter/material.dart';
import 'package:{{ project_name }}/app/app_showcase.dart';
import 'package:{{ project_name }}/core/routes/route_constants.dart';
""",
    ),
    fragment(
        A.CORE, "default_theme", T,
        order=10,
        property="""
theme: ThemeData.light(useMaterial3: true),
darkTheme: ThemeData.dark(useMaterial3: true),
""",
    ),

    # -- State management -----------------------------------------------------
    *(
        fragment(
            A.STATE_MANAGEMENT, state, T,
            order=50, slot="app_class",
            imports=imports,
            wrapper=wrapper,
        )
        for state, (imports, wrapper) in _APP_CLASSES.items()
    ),

    # -- Modules --------------------------------------------------------------
    fragment(
        A.MODULE, "Localization", T,
        order=20,
        imports=f"""
import 'package:flutter_localizations/flutter_localizations.dart';
import '{_LOCALE_DIR}/generated/app_localizations.dart';
""",
        property="""
supportedLocales: AppLocalizations.supportedLocales,
localizationsDelegates: AppLocalizations.localizationsDelegates,
""",
    ),
    fragment(
        A.MODULE, "Push Notification", T,
        order=0,
        imports="import 'package:{{ project_name }}/core/notifications/notification_handler.dart';",
    ),

    # -- Cross-axis rules -----------------------------------------------------
    fragment(
        A.COMPOUND, "Theme Manager+App Theme", T,
        order=10,
        requires=((A.MODULE, "Theme Manager"),),
        suppresses=((A.CORE, "default_theme", T),),
        imports=f"import '{_THEME_DIR}/app_theme_extension.dart';",
        property="""
theme: AppTheme.light,
darkTheme: AppTheme.dark,
""",
    ),
    *_binding_rules("Theme Manager", _THEME_BINDINGS, order=11),
    *_binding_rules("Localization", _LOCALE_BINDINGS, order=21),
]
