"""Fragments for ``lib/core/utils/state_management_observability.dart``."""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.OBSERVABILITY

FRAGMENTS = [
    fragment(
        A.CORE, "logging", T,
        order=0,
        imports="import 'package:flutter/foundation.dart';",
        body="  _log('{{ state_management }} state observability configured!');",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Provider", T,
        slot="observer",
        body="  _log('Use ObservableChangeNotifier instead of ChangeNotifier for logging');",
        wrapper="""
/// ChangeNotifier that logs every notification it sends.
class ObservableChangeNotifier extends ChangeNotifier {
  void notifyListenersWithLog(String message, {Object? oldValue, Object? newValue}) {
    _log('State change in $runtimeType: $message');
    if (oldValue != null && newValue != null) {
      _log('  From: $oldValue');
      _log('  To: $newValue');
    }
    notifyListeners();
  }
}
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Riverpod", T,
        slot="observer",
        imports="import 'package:flutter_riverpod/flutter_riverpod.dart';",
        wrapper="""
/// ProviderObserver that logs provider lifecycle and state changes.
class StateObserver extends ProviderObserver {
  StateObserver({
    this.logChanges = true,
    this.logCreations = true,
    this.logDisposals = true,
    this.logErrors = true,
  });

  final bool logChanges;
  final bool logCreations;
  final bool logDisposals;
  final bool logErrors;

  @override
  void didUpdateProvider(
    ProviderBase provider,
    Object? previousValue,
    Object? newValue,
    ProviderContainer container,
  ) {
    if (logChanges && previousValue != newValue) {
      _log('STATE UPDATED: ${provider.name ?? provider.runtimeType}\\n'
          'FROM: $previousValue\\n'
          'TO: $newValue');
    }
    super.didUpdateProvider(provider, previousValue, newValue, container);
  }

  @override
  void didAddProvider(ProviderBase provider, Object? value, ProviderContainer container) {
    if (logCreations) {
      _log('PROVIDER CREATED: ${provider.name ?? provider.runtimeType} = $value');
    }
    super.didAddProvider(provider, value, container);
  }

  @override
  void didDisposeProvider(ProviderBase provider, ProviderContainer container) {
    if (logDisposals) {
      _log('PROVIDER DISPOSED: ${provider.name ?? provider.runtimeType}');
    }
    super.didDisposeProvider(provider, container);
  }

  @override
  void providerDidFail(
    ProviderBase provider,
    Object error,
    StackTrace stackTrace,
    ProviderContainer container,
  ) {
    if (logErrors) {
      _log('PROVIDER ERROR: ${provider.name ?? provider.runtimeType}: $error');
    }
    super.providerDidFail(provider, error, stackTrace, container);
  }
}
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Bloc", T,
        slot="observer",
        imports="import 'package:flutter_bloc/flutter_bloc.dart';",
        wrapper="""
/// BlocObserver that logs events, transitions and errors of every bloc.
class AppBlocObserver extends BlocObserver {
  @override
  void onCreate(BlocBase bloc) {
    super.onCreate(bloc);
    _log('onCreate -- bloc: ${bloc.runtimeType}');
  }

  @override
  void onEvent(Bloc bloc, Object? event) {
    super.onEvent(bloc, event);
    _log('onEvent -- bloc: ${bloc.runtimeType}, event: $event');
  }

  @override
  void onChange(BlocBase bloc, Change change) {
    super.onChange(bloc, change);
    _log('onChange -- bloc: ${bloc.runtimeType}, change: $change');
  }

  @override
  void onTransition(Bloc bloc, Transition transition) {
    super.onTransition(bloc, transition);
    _log('onTransition -- bloc: ${bloc.runtimeType}, transition: $transition');
  }

  @override
  void onError(BlocBase bloc, Object error, StackTrace stackTrace) {
    _log('onError -- bloc: ${bloc.runtimeType}, error: $error');
    super.onError(bloc, error, stackTrace);
  }

  @override
  void onClose(BlocBase bloc) {
    super.onClose(bloc);
    _log('onClose -- bloc: ${bloc.runtimeType}');
  }
}
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "GetX", T,
        slot="observer",
        imports="import 'package:get/get.dart';",
        body="  _log('Extend GetXObserver instead of GetxController for logging');",
        wrapper="""
/// GetxController that logs its lifecycle.
class GetXObserver extends GetxController {
  @override
  void onInit() {
    _log('GetX controller initialized: $runtimeType');
    super.onInit();
  }

  @override
  void onReady() {
    _log('GetX controller ready: $runtimeType');
    super.onReady();
  }

  @override
  void onClose() {
    _log('GetX controller closed: $runtimeType');
    super.onClose();
  }
}
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "MobX", T,
        slot="observer",
        body="  _log('Use MobXObserver to log actions, computed values and observables');",
        wrapper="""
/// Static helpers for tracing MobX reactions.
class MobXObserver {
  static void logAction(String actionName, {Object? value}) {
    _log('MobX Action: $actionName${value != null ? ' - Value: $value' : ''}');
  }

  static void logComputed(String computedName, Object? value) {
    _log('MobX Computed: $computedName - Value: $value');
  }

  static void logObservable(String observableName, Object? oldValue, Object? newValue) {
    _log('MobX Observable: $observableName\\n  From: $oldValue\\n  To: $newValue');
  }
}
""",
    ),
    fragment(
        A.STATE_MANAGEMENT, "Redux", T,
        slot="observer",
        imports="import 'package:redux/redux.dart';",
        wrapper="""
/// Redux middleware that logs every dispatched action and resulting state.
class ReduxLoggingMiddleware<T> {
  Middleware<T> createMiddleware() {
    return (Store<T> store, dynamic action, NextDispatcher next) {
      _log('Redux Action: ${action.runtimeType}');
      _log('  Current State: ${store.state}');
      next(action);
      _log('  Next State: ${store.state}');
    };
  }
}
""",
    ),
]
