"""Fragments for the Localization files.

``generated/app_localizations.dart`` has the shape ``flutter gen-l10n``
produces, so regenerating from ARB files later replaces it in place.
``locale_controller.dart`` holds the selected locale per state-management
library; Redux keeps it in its store instead.
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

LOCALIZATIONS = FileKind.LOCALIZATIONS
CONTROLLER = FileKind.LOCALE_CONTROLLER

# state management -> (imports, declarations)
_CONTROLLERS = {
    "Provider": (
        "",
        """
/// Holds the selected locale for Provider.
class LocalizationProvider extends ChangeNotifier {
  Locale? _locale;

  /// `null` follows the device locale.
  Locale? get locale => _locale;

  void setLocale(Locale? locale) {
    if (locale == _locale) return;
    _locale = locale;
    notifyListeners();
  }
}
""",
    ),
    "Riverpod": (
        "import 'package:flutter_riverpod/flutter_riverpod.dart';",
        """
/// Selected locale; `null` follows the device locale.
final localeProvider = StateProvider<Locale?>((ref) => null);
""",
    ),
    "Bloc": (
        "import 'package:flutter_bloc/flutter_bloc.dart';",
        """
/// Requests a locale change.
class ChangeLocale {
  final Locale? locale;

  const ChangeLocale(this.locale);
}

/// Locale state emitted by [LocaleBloc]; a `null` locale follows the device.
class LocaleState {
  final Locale? locale;

  const LocaleState({this.locale});
}

/// Holds the selected locale for BLoC.
class LocaleBloc extends Bloc<ChangeLocale, LocaleState> {
  LocaleBloc() : super(const LocaleState()) {
    on<ChangeLocale>((event, emit) => emit(LocaleState(locale: event.locale)));
  }
}
""",
    ),
    "GetX": (
        "import 'package:get/get.dart';",
        """
/// Holds the selected locale for GetX.
class LocalizationController extends GetxController {
  final Rx<Locale?> _locale = Rx<Locale?>(null);

  /// `null` follows the device locale.
  Locale? get locale => _locale.value;

  void setLocale(Locale locale) {
    _locale.value = locale;
    Get.updateLocale(locale);
  }
}
""",
    ),
    "MobX": (
        "import 'package:mobx/mobx.dart';",
        """
/// Holds the selected locale for MobX.
class LocalizationStore {
  final Observable<Locale?> _locale = Observable<Locale?>(null);

  /// `null` follows the device locale.
  Locale? get locale => _locale.value;

  void setLocale(Locale? locale) {
    runInAction(() => _locale.value = locale);
  }
}

/// Global localization store instance.
final localizationStore = LocalizationStore();
""",
    ),
}


FRAGMENTS = [
    fragment(
        A.MODULE, "Localization", LOCALIZATIONS,
        imports="""
import 'package:flutter/foundation.dart';
import 'package:flutter/widgets.dart';
import 'package:flutter_localizations/flutter_localizations.dart';
""",
        body="""
/// Localized strings of {{ project_name | pascal_case }}.
///
/// Regenerate with `flutter gen-l10n` once ARB files are added.
class AppLocalizations {
  AppLocalizations(this.locale);

  final Locale locale;

  static AppLocalizations of(BuildContext context) {
    return Localizations.of<AppLocalizations>(context, AppLocalizations)!;
  }

  static const LocalizationsDelegate<AppLocalizations> delegate =
      _AppLocalizationsDelegate();

  static const List<LocalizationsDelegate<dynamic>> localizationsDelegates = [
    delegate,
    GlobalMaterialLocalizations.delegate,
    GlobalCupertinoLocalizations.delegate,
    GlobalWidgetsLocalizations.delegate,
  ];

  static const List<Locale> supportedLocales = [
    Locale('en'),
    Locale('es'),
  ];

  static const Map<String, Map<String, String>> _strings = {
    'en': {
      'appTitle': '{{ project_name | pascal_case }}',
      'welcome': 'Welcome',
    },
    'es': {
      'appTitle': '{{ project_name | pascal_case }}',
      'welcome': 'Bienvenido',
    },
  };

  String get appTitle => _lookup('appTitle');

  String get welcome => _lookup('welcome');

  String _lookup(String key) {
    return _strings[locale.languageCode]?[key] ?? _strings['en']![key]!;
  }
}

class _AppLocalizationsDelegate extends LocalizationsDelegate<AppLocalizations> {
  const _AppLocalizationsDelegate();

  @override
  bool isSupported(Locale locale) {
    return AppLocalizations.supportedLocales
        .any((supported) => supported.languageCode == locale.languageCode);
  }

  @override
  Future<AppLocalizations> load(Locale locale) {
    return SynchronousFuture<AppLocalizations>(AppLocalizations(locale));
  }

  @override
  bool shouldReload(_AppLocalizationsDelegate old) => false;
}
""",
    ),
    *(
        fragment(
            A.COMPOUND, f"{state}+Localization", CONTROLLER,
            requires=((A.STATE_MANAGEMENT, state), (A.MODULE, "Localization")),
            imports=f"import 'package:flutter/material.dart';\n{imports}",
            body=declarations,
        )
        for state, (imports, declarations) in _CONTROLLERS.items()
    ),
]
