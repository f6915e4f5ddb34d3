"""Fragments for the Theme Manager files.

``app_theme_extension.dart`` holds the light/dark themes and the
``ThemeModeEnum`` every binding shares.  ``theme_controller.dart`` holds the
state-management specific holder of the selected mode; Redux keeps the mode
in its store instead (see ``redux.py``).
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

THEME = FileKind.APP_THEME
CONTROLLER = FileKind.THEME_CONTROLLER

_MATERIAL = "import 'package:flutter/material.dart';"
_THEME_IMPORT = (
    "import 'package:{{ project_name }}/core/design_system/theme_extension/"
    "app_theme_extension.dart';"
)

# state management -> (imports, declarations)
_CONTROLLERS = {
    "Provider": (
        "import 'package:flutter/material.dart';",
        """
/// Holds the selected theme mode for Provider.
class ThemeProvider extends ChangeNotifier {
  ThemeModeEnum _mode = ThemeModeEnum.system;

  ThemeModeEnum get mode => _mode;

  ThemeMode get themeMode => _mode.toThemeMode();

  void setTheme(ThemeModeEnum mode) {
    if (mode == _mode) return;
    _mode = mode;
    notifyListeners();
  }
}
""",
    ),
    "Riverpod": (
        "import 'package:flutter_riverpod/flutter_riverpod.dart';",
        """
/// Selected theme mode.
final themeModeProvider = StateProvider<ThemeModeEnum>((ref) => ThemeModeEnum.system);

/// The selected mode as a Flutter [ThemeMode], for `MaterialApp.themeMode`.
final flutterThemeModeProvider = Provider<ThemeMode>(
  (ref) => ref.watch(themeModeProvider).toThemeMode(),
);
""",
    ),
    "Bloc": (
        "import 'package:flutter_bloc/flutter_bloc.dart';",
        """
/// Theme state emitted by [ThemeCubit].
class ThemeState {
  final ThemeModeEnum themeMode;

  const ThemeState(this.themeMode);
}

/// Holds the selected theme mode for BLoC.
class ThemeCubit extends Cubit<ThemeState> {
  ThemeCubit() : super(const ThemeState(ThemeModeEnum.system));

  void setTheme(ThemeModeEnum mode) => emit(ThemeState(mode));
}
""",
    ),
    "GetX": (
        "import 'package:get/get.dart';",
        """
/// Holds the selected theme mode for GetX.
class ThemeController extends GetxController {
  final Rx<ThemeModeEnum> _mode = ThemeModeEnum.system.obs;

  ThemeModeEnum get mode => _mode.value;

  ThemeMode get themeMode => _mode.value.toThemeMode();

  void setTheme(ThemeModeEnum mode) {
    _mode.value = mode;
    Get.changeThemeMode(mode.toThemeMode());
  }
}
""",
    ),
    "MobX": (
        "import 'package:mobx/mobx.dart';",
        """
/// Holds the selected theme mode for MobX.
class ThemeStore {
  final Observable<ThemeModeEnum> _mode = Observable(ThemeModeEnum.system);

  ThemeModeEnum get mode => _mode.value;

  ThemeMode get flutterThemeMode => _mode.value.toThemeMode();

  void setTheme(ThemeModeEnum mode) {
    runInAction(() => _mode.value = mode);
  }
}

/// Global theme store instance.
final themeStore = ThemeStore();
""",
    ),
}


def _controller_rules() -> list:
    return [
        fragment(
            A.COMPOUND, f"{state}+Theme Manager", CONTROLLER,
            requires=((A.STATE_MANAGEMENT, state), (A.MODULE, "Theme Manager")),
            imports=f"{_MATERIAL}\n{imports}\n{_THEME_IMPORT}",
            body=declarations,
        )
        for state, (imports, declarations) in _CONTROLLERS.items()
    ]


FRAGMENTS = [
    fragment(
        A.MODULE, "Theme Manager", THEME,
        imports=_MATERIAL,
        body="""
/// Theme modes offered to the user.
enum ThemeModeEnum {
  light,
  dark,
  system;

  /// Converts to Flutter's [ThemeMode].
  ThemeMode toThemeMode() {
    switch (this) {
      case ThemeModeEnum.light:
        return ThemeMode.light;
      case ThemeModeEnum.dark:
        return ThemeMode.dark;
      case ThemeModeEnum.system:
        return ThemeMode.system;
    }
  }
}

/// Brand colours, available through `Theme.of(context).extension<AppColorExtension>()`.
class AppColorExtension extends ThemeExtension<AppColorExtension> {
  const AppColorExtension({
    required this.surface,
    required this.surfaceCard,
    required this.textPrimary,
    required this.activeButton,
  });

  final Color surface;
  final Color surfaceCard;
  final Color textPrimary;
  final Color activeButton;

  @override
  AppColorExtension copyWith({
    Color? surface,
    Color? surfaceCard,
    Color? textPrimary,
    Color? activeButton,
  }) {
    return AppColorExtension(
      surface: surface ?? this.surface,
      surfaceCard: surfaceCard ?? this.surfaceCard,
      textPrimary: textPrimary ?? this.textPrimary,
      activeButton: activeButton ?? this.activeButton,
    );
  }

  @override
  AppColorExtension lerp(ThemeExtension<AppColorExtension>? other, double t) {
    if (other is! AppColorExtension) return this;
    return AppColorExtension(
      surface: Color.lerp(surface, other.surface, t)!,
      surfaceCard: Color.lerp(surfaceCard, other.surfaceCard, t)!,
      textPrimary: Color.lerp(textPrimary, other.textPrimary, t)!,
      activeButton: Color.lerp(activeButton, other.activeButton, t)!,
    );
  }
}

/// Light and dark themes of the application.
class AppTheme {
  AppTheme._();

  static const _lightColors = AppColorExtension(
    surface: Color(0xFFF2F2F2),
    surfaceCard: Color(0xFFF6F6F7),
    textPrimary: Color(0xFF000003),
    activeButton: Color(0xFF0000E5),
  );

  static const _darkColors = AppColorExtension(
    surface: Color(0xFF141619),
    surfaceCard: Color(0xFF1F2125),
    textPrimary: Color(0xFFF6F6F7),
    activeButton: Color.fromARGB(255, 73, 73, 215),
  );

  static final ThemeData light = ThemeData(
    useMaterial3: true,
    brightness: Brightness.light,
    fontFamily: 'Poppins',
    colorSchemeSeed: _lightColors.activeButton,
    scaffoldBackgroundColor: _lightColors.surface,
    extensions: const [_lightColors],
  );

  static final ThemeData dark = ThemeData(
    useMaterial3: true,
    brightness: Brightness.dark,
    fontFamily: 'Poppins',
    colorSchemeSeed: _darkColors.activeButton,
    scaffoldBackgroundColor: _darkColors.surface,
    extensions: const [_darkColors],
  );
}
""",
    ),
    *_controller_rules(),
]
