"""Fragments for ``lib/core/redux/app_state.dart``.

Each fragment adds one slice to the store: a ``property`` line
``<Type> <name>State`` (the frame derives the field, constructor argument,
initial value and ``<name>Reducer`` call from it) and a ``body`` with the
slice class, its actions and its reducer.
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.REDUX_STATE

FRAGMENTS = [
    fragment(
        A.STATE_MANAGEMENT, "Redux", T,
        order=0,
        property="LoadingState loadingState",
        body="""
/// Global busy flag for long-running actions.
class LoadingState {
  final bool isLoading;

  const LoadingState({required this.isLoading});

  factory LoadingState.initial() => const LoadingState(isLoading: false);
}

class SetLoadingAction {
  final bool isLoading;

  SetLoadingAction(this.isLoading);
}

LoadingState loadingReducer(LoadingState state, dynamic action) {
  if (action is SetLoadingAction) {
    return LoadingState(isLoading: action.isLoading);
  }
  return state;
}
""",
    ),
    fragment(
        A.COMPOUND, "Redux+Authentication", T,
        order=10,
        requires=((A.STATE_MANAGEMENT, "Redux"), (A.FEATURE, "Authentication")),
        property="AuthState authState",
        body="""
/// Authentication slice of the store.
class AuthState {
  final bool isAuthenticated;
  final String? userId;

  const AuthState({required this.isAuthenticated, this.userId});

  factory AuthState.initial() => const AuthState(isAuthenticated: false);
}

class LoginSuccessAction {
  final String userId;

  LoginSuccessAction(this.userId);
}

class LogoutAction {}

AuthState authReducer(AuthState state, dynamic action) {
  if (action is LoginSuccessAction) {
    return AuthState(isAuthenticated: true, userId: action.userId);
  }
  if (action is LogoutAction) {
    return AuthState.initial();
  }
  return state;
}
""",
    ),
    fragment(
        A.COMPOUND, "Redux+Theme Manager", T,
        order=20,
        requires=((A.STATE_MANAGEMENT, "Redux"), (A.MODULE, "Theme Manager")),
        imports="""
import 'package:flutter/material.dart';
import 'package:{{ project_name }}/core/design_system/theme_extension/app_theme_extension.dart';
""",
        property="ThemeState themeState",
        body="""
/// Theme slice of the store.
class ThemeState {
  final ThemeModeEnum themeMode;

  const ThemeState({required this.themeMode});

  factory ThemeState.initial() => const ThemeState(themeMode: ThemeModeEnum.system);

  ThemeMode get flutterThemeMode => themeMode.toThemeMode();
}

class SetThemeAction {
  final ThemeModeEnum themeMode;

  SetThemeAction(this.themeMode);
}

ThemeState themeReducer(ThemeState state, dynamic action) {
  if (action is SetThemeAction) {
    return ThemeState(themeMode: action.themeMode);
  }
  return state;
}
""",
    ),
    fragment(
        A.COMPOUND, "Redux+Localization", T,
        order=30,
        requires=((A.STATE_MANAGEMENT, "Redux"), (A.MODULE, "Localization")),
        imports="import 'package:flutter/material.dart';",
        property="LocaleState localeState",
        body="""
/// Locale slice of the store; a `null` locale follows the device.
class LocaleState {
  final Locale? locale;

  const LocaleState({this.locale});

  factory LocaleState.initial() => const LocaleState();
}

class SetLocaleAction {
  final Locale? locale;

  SetLocaleAction(this.locale);
}

LocaleState localeReducer(LocaleState state, dynamic action) {
  if (action is SetLocaleAction) {
    return LocaleState(locale: action.locale);
  }
  return state;
}
""",
    ),
]
