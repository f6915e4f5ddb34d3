"""Fragments for ``pubspec.yaml``.

Dependency entries are deduplicated by package name when composed, so two
axis values asking for the same package (Firebase for authentication and for
push notifications) produce a single entry; the first one selected wins.
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.MANIFEST

FRAGMENTS = [
    # -- Core ---------------------------------------------------------------
    fragment(
        A.CORE, "packages", T,
        order=0,
        dependency="""
  # Core packages
  cupertino_icons: ^1.0.6
  intl: any
  equatable: ^2.0.5
  path_provider: ^2.1.1
  shared_preferences: ^2.5.2
  flutter_secure_storage: ^9.0.0
  cached_network_image: ^3.3.0
  url_launcher: ^6.1.14
  connectivity_plus: ^6.0.0
  flutter_svg: ^2.0.9
  flutter_dotenv: ^5.1.0
  json_annotation: ^4.8.1
  freezed_annotation: ^2.4.1
  shimmer: ^3.0.0
  dio: ^5.3.3
  logger: ^2.0.2
""",
        dev_dependency="""
  build_runner: ^2.4.6
  flutter_gen_runner: ^5.3.2
  flutter_launcher_icons: ^0.13.1
  source_gen: ^1.4.0
  json_serializable: ^6.7.1
  freezed: ^2.4.5
""",
        asset="""
    - assets/images/
    - assets/icons/
    - assets/jsons/
    - assets/gif/
""",
    ),
    fragment(
        A.CORE, "env_asset", T,
        order=90,
        asset="    - .env",
    ),

    # -- Architecture ---------------------------------------------------------
    fragment(
        A.ARCHITECTURE, "Clean Architecture", T,
        order=20,
        dependency="""
  # Clean Architecture dependencies
  dartz: ^0.10.1
  injectable: ^2.3.0
  get_it: ^7.6.4
""",
        dev_dependency="  injectable_generator: ^2.4.0",
    ),
    fragment(
        A.ARCHITECTURE, "MVVM", T,
        order=20,
        dependency="""
  # MVVM Architecture dependencies
  stacked: ^3.4.1
  stacked_services: ^1.3.0
  get_it: ^7.6.4
""",
    ),

    # -- State management -----------------------------------------------------
    fragment(
        A.STATE_MANAGEMENT, "Provider", T,
        order=10,
        dependency="""
  # Provider state management
  provider: ^6.0.5
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Riverpod", T,
        order=10,
        dependency="""
  # Riverpod state management
  flutter_riverpod: ^2.6.1
""",
        dev_dependency="  riverpod_generator: ^2.3.5",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Bloc", T,
        order=10,
        dependency="""
  # BLoC state management
  flutter_bloc: ^8.1.3
  bloc: ^8.1.2
  hydrated_bloc: ^8.0.0
""",
        dev_dependency="  bloc_test: ^9.1.4",
    ),
    fragment(
        A.STATE_MANAGEMENT, "GetX", T,
        order=10,
        dependency="""
  # GetX state management
  get: ^4.7.2
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "MobX", T,
        order=10,
        dependency="""
  # MobX state management
  mobx: ^2.5.0
  flutter_mobx: ^2.1.0
""",
        dev_dependency="  mobx_codegen: ^2.7.0",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Redux", T,
        order=10,
        dependency="""
  # Redux state management
  redux: ^5.0.0
  flutter_redux: ^0.10.0
  redux_thunk: ^0.4.0
""",
    ),

    # -- Features -------------------------------------------------------------
    fragment(
        A.FEATURE, "Authentication", T,
        order=30,
        dependency="""
  # Authentication dependencies
  firebase_core: ^2.24.2
  firebase_auth: ^4.15.3
""",
    ),
    fragment(
        A.FEATURE, "User Profile", T,
        order=30,
        dependency="""
  # User Profile dependencies
  image_picker: ^1.0.4
  image_cropper: ^5.0.1
""",
    ),
    fragment(
        A.FEATURE, "Dashboard", T,
        order=30,
        dev_dependency="  flutter_native_splash: ^2.3.8",
        trailer="""
# Flutter native splash configuration
flutter_native_splash:
  color: "#FFFFFF"
  image: assets/images/splash.png
  android_12:
    image: assets/images/splash_android12.png
    icon_background_color: "#FFFFFF"
  web: false
""",
    ),

    # -- Modules --------------------------------------------------------------
    fragment(
        A.MODULE, "Network Layer", T,
        order=40,
        dependency="""
  # Network layer dependencies
  retrofit: ^4.0.3
  internet_connection_checker: ^3.0.1
""",
    ),
    fragment(
        A.MODULE, "Local Storage", T,
        order=40,
        dependency="""
  # Local storage dependencies
  hive: ^2.2.3
  hive_flutter: ^1.1.0
""",
        dev_dependency="  hive_generator: ^2.0.1",
    ),
    fragment(
        A.MODULE, "Localization", T,
        order=40,
        dependency="""
  # Localization dependencies
  easy_localization: ^3.0.3
""",
        asset=("    - assets/translations/", 50),
    ),
    fragment(
        A.MODULE, "Push Notification", T,
        order=40,
        dependency="""
  # Firebase dependencies for push notifications
  firebase_core: ^2.15.0
  firebase_messaging: ^14.6.5
  flutter_local_notifications: ^16.1.0
""",
    ),
    fragment(
        A.MODULE, "Theme Manager", T,
        order=40,
        dependency="""
  # Theme Manager dependencies
  google_fonts: ^6.1.0
  dynamic_color: ^1.6.8
""",
    ),

    # -- Cross-axis rules -----------------------------------------------------
    fragment(
        A.COMPOUND, "Clean Architecture+Network Layer", T,
        order=45,
        requires=((A.ARCHITECTURE, "Clean Architecture"), (A.MODULE, "Network Layer")),
        dev_dependency="  retrofit_generator: ^8.0.1",
    ),
]
