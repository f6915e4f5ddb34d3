"""Fragments for ``lib/main.dart``.

Statement order inside ``main()``:

    0   binding initialisation
    10  localization            40  dependency injection
    20  firebase                50  state-management setup
    25  notification handler    70  observability
    30  local storage           80  system UI
    35  network services        90  runApp (exclusive ``launch`` slot)
"""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.ENTRYPOINT

FRAGMENTS = [
    # -- Core ---------------------------------------------------------------
    fragment(
        A.CORE, "bootstrap", T,
        order=0,
        imports="""
import 'package:flutter/material.dart';
import 'package:flutter/services.dart';
import 'dart:async';
import 'package:{{ project_name }}/app/app.dart';
""",
        body="  WidgetsFlutterBinding.ensureInitialized();",
    ),
    fragment(
        A.CORE, "observability", T,
        order=70,
        imports="import 'package:{{ project_name }}/core/utils/state_management_observability.dart';",
        body="""
  // Setup state management observability
  setupStateObservability();
""",
    ),
    fragment(
        A.CORE, "system_ui", T,
        order=80,
        body="""
  await SystemChrome.setPreferredOrientations([
    DeviceOrientation.portraitUp,
    DeviceOrientation.portraitDown,
  ]);

  SystemChrome.setSystemUIOverlayStyle(
    const SystemUiOverlayStyle(
      statusBarColor: Colors.transparent,
      statusBarIconBrightness: Brightness.dark,
    ),
  );
""",
    ),

    # -- Architecture ---------------------------------------------------------
    fragment(
        A.ARCHITECTURE, "Clean Architecture", T,
        order=40,
        imports="""
import 'package:flutter_dotenv/flutter_dotenv.dart';
import 'package:{{ project_name }}/core/di/injection.dart';
""",
        body="""
  await dotenv.load(fileName: ".env");
  await configureDependencies();
""",
    ),
    fragment(
        A.ARCHITECTURE, "MVVM", T,
        order=40,
        imports="""
import 'package:stacked_services/stacked_services.dart';
import 'package:{{ project_name }}/app/app.locator.dart';
""",
        body="  await setupLocator();",
    ),

    # -- State management -----------------------------------------------------
    fragment(
        A.STATE_MANAGEMENT, "Provider", T,
        order=90, slot="launch",
        imports="import 'package:provider/provider.dart';",
        body="""
  runApp(
    MultiProvider(
      providers: [
        // Add your providers here
        // ChangeNotifierProvider(create: (_) => YourProvider()),
      ],
      child: const App(),
    ),
  );
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Riverpod", T,
        order=90, slot="launch",
        imports="import 'package:flutter_riverpod/flutter_riverpod.dart';",
        body="""
  runApp(
    ProviderScope(
      observers: [StateObserver()],
      child: const App(),
    ),
  );
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Bloc", T,
        order=90, slot="launch",
        imports="""
import 'package:flutter_bloc/flutter_bloc.dart';
import 'package:hydrated_bloc/hydrated_bloc.dart';
import 'package:path_provider/path_provider.dart' as path_provider;
""",
        body=("""
  HydratedBloc.storage = await HydratedStorage.build(
    storageDirectory: await path_provider.getApplicationDocumentsDirectory(),
  );
  Bloc.observer = AppBlocObserver();
""", 50),
        epilogue="""
  runApp(
    MultiBlocProvider(
      providers: [
        // Add your BLoCs here
        // BlocProvider(create: (_) => YourBloc()),
      ],
      child: const App(),
    ),
  );
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "GetX", T,
        order=90, slot="launch",
        imports="import 'package:get/get.dart';",
        body="  runApp(const App());",
    ),
    fragment(
        A.STATE_MANAGEMENT, "MobX", T,
        order=90, slot="launch",
        imports="import 'package:flutter_mobx/flutter_mobx.dart';",
        body="  runApp(const App());",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Redux", T,
        order=90, slot="launch",
        imports="""
import 'package:flutter_redux/flutter_redux.dart';
import 'package:redux/redux.dart';
import 'package:redux_thunk/redux_thunk.dart';
import 'package:{{ project_name }}/core/redux/app_state.dart';
""",
        body="""
  final store = Store<AppState>(
    appReducer,
    initialState: AppState.initial(),
    middleware: [thunkMiddleware, ReduxLoggingMiddleware<AppState>().createMiddleware()],
  );

  runApp(
    StoreProvider<AppState>(
      store: store,
      child: const App(),
    ),
  );
""",
    ),

    # -- Features -------------------------------------------------------------
    fragment(
        A.FEATURE, "Authentication", T,
        order=20,
        imports="""
import 'package:firebase_core/firebase_core.dart';
import 'package:{{ project_name }}/firebase_options.dart';
""",
        body="""
  await Firebase.initializeApp(
    options: DefaultFirebaseOptions.currentPlatform,
  );
""",
    ),

    # -- Modules --------------------------------------------------------------
    fragment(
        A.MODULE, "Localization", T,
        order=10,
        imports="import 'package:easy_localization/easy_localization.dart';",
        body="  await EasyLocalization.ensureInitialized();",
    ),
    fragment(
        A.MODULE, "Local Storage", T,
        order=30,
        imports="""
import 'package:hive_flutter/hive_flutter.dart';
import 'package:path_provider/path_provider.dart' as path_provider;
""",
        body="""
  final appDocumentDirectory = await path_provider.getApplicationDocumentsDirectory();
  await Hive.initFlutter(appDocumentDirectory.path);
""",
    ),
    fragment(
        A.MODULE, "Network Layer", T,
        order=35,
        imports="""
import 'package:{{ project_name }}/core/network/services/connectivity_service.dart';
import 'package:{{ project_name }}/core/network/network_info.dart';
import 'package:internet_connection_checker/internet_connection_checker.dart';
""",
        body="""
  // Initialize network services
  final connectivityService = ConnectivityService();
  final networkInfo = NetworkInfoImpl(InternetConnectionChecker());
""",
    ),
    fragment(
        A.MODULE, "Push Notification", T,
        order=20,
        imports="""
import 'package:firebase_core/firebase_core.dart';
import 'package:{{ project_name }}/core/notifications/notification_handler.dart';
""",
        body="""
  // Initialize Firebase
  await Firebase.initializeApp();
""",
        epilogue=("""
  // Initialize notification services
  await notificationHandler.initialize();
""", 25),
    ),

    # -- Cross-axis rules -----------------------------------------------------
    fragment(
        A.COMPOUND, "Authentication+Push Notification", T,
        order=25,
        requires=((A.FEATURE, "Authentication"), (A.MODULE, "Push Notification")),
        suppresses=((A.MODULE, "Push Notification", T),),
        imports="import 'package:{{ project_name }}/core/notifications/notification_handler.dart';",
        body="""
  // Initialize notification services
  await notificationHandler.initialize();
""",
    ),
    fragment(
        A.COMPOUND, "Clean Architecture+Push Notification", T,
        order=45,
        requires=((A.ARCHITECTURE, "Clean Architecture"), (A.MODULE, "Push Notification")),
        imports="import 'package:get_it/get_it.dart';",
        body="  GetIt.I.registerSingleton<NotificationHandler>(notificationHandler);",
    ),
    fragment(
        A.COMPOUND, "GetX+Theme Manager", T,
        order=50,
        requires=((A.STATE_MANAGEMENT, "GetX"), (A.MODULE, "Theme Manager")),
        imports="import 'package:{{ project_name }}/core/design_system/theme_extension/theme_controller.dart';",
        body="  Get.put(ThemeController());",
    ),
    fragment(
        A.COMPOUND, "GetX+Localization", T,
        order=51,
        requires=((A.STATE_MANAGEMENT, "GetX"), (A.MODULE, "Localization")),
        imports="import 'package:{{ project_name }}/core/localization/locale_controller.dart';",
        body="  Get.put(LocalizationController());",
    ),
]
