"""Fragments for route constants and the dependency-injection files."""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

ROUTES = FileKind.ROUTE_CONSTANTS
INJECTION = FileKind.INJECTION
NETWORK_DI = FileKind.NETWORK_DI
LOCATOR = FileKind.LOCATOR

_CLEAN_NETWORK = ((A.ARCHITECTURE, "Clean Architecture"), (A.MODULE, "Network Layer"))

FRAGMENTS = [
    # -- Route constants ----------------------------------------------------
    fragment(
        A.CORE, "home_route", ROUTES,
        order=0,
        body="  static const String home = '/';",
    ),
    fragment(
        A.FEATURE, "Authentication", ROUTES,
        order=10,
        body="""
  static const String login = '/login';
  static const String register = '/register';
  static const String forgotPassword = '/forgot-password';
""",
    ),
    fragment(
        A.FEATURE, "User Profile", ROUTES,
        order=20,
        body="""
  static const String profile = '/profile';
  static const String editProfile = '/profile/edit';
""",
    ),
    fragment(
        A.FEATURE, "Settings", ROUTES,
        order=30,
        body="  static const String settings = '/settings';",
    ),
    fragment(
        A.FEATURE, "Dashboard", ROUTES,
        order=40,
        body="  static const String dashboard = '/dashboard';",
    ),

    # -- Dependency injection -------------------------------------------------
    fragment(
        A.ARCHITECTURE, "Clean Architecture", INJECTION,
        order=0,
        imports="import 'package:get_it/get_it.dart';",
        body="  // Register repositories, use cases and data sources here.",
    ),
    fragment(
        A.COMPOUND, "Clean Architecture+Network Layer", INJECTION,
        order=10,
        requires=_CLEAN_NETWORK,
        imports="import 'package:{{ project_name }}/core/di/network_module.dart';",
        body="  registerNetworkDependencies(sl);",
    ),
    fragment(
        A.COMPOUND, "Clean Architecture+Network Layer", NETWORK_DI,
        order=0,
        requires=_CLEAN_NETWORK,
        imports="""
import 'package:dio/dio.dart';
import 'package:get_it/get_it.dart';
import 'package:internet_connection_checker/internet_connection_checker.dart';
import 'package:{{ project_name }}/core/network/network_info.dart';
import 'package:{{ project_name }}/core/network/services/connectivity_service.dart';
""",
        body="""
/// Registers the network stack (HTTP client, connectivity) with [sl].
void registerNetworkDependencies(GetIt sl) {
  sl.registerLazySingleton<Dio>(() => Dio());
  sl.registerLazySingleton<InternetConnectionChecker>(() => InternetConnectionChecker());
  sl.registerLazySingleton<NetworkInfo>(() => NetworkInfoImpl(sl()));
  sl.registerLazySingleton<ConnectivityService>(() => ConnectivityService());
}
""",
    ),
    fragment(
        A.ARCHITECTURE, "MVVM", LOCATOR,
        imports="""
import 'package:get_it/get_it.dart';
import 'package:stacked_services/stacked_services.dart';
""",
        body="""
/// Service locator shared by the view models.
final GetIt locator = GetIt.instance;

/// Registers the stacked services used for navigation, dialogs and snackbars.
Future<void> setupLocator() async {
  locator.registerLazySingleton(() => NavigationService());
  locator.registerLazySingleton(() => DialogService());
  locator.registerLazySingleton(() => SnackbarService());
}
""",
    ),
]
