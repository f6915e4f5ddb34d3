"""Fragments for the network layer support files."""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

INFO = FileKind.NETWORK_INFO
CONNECTIVITY = FileKind.CONNECTIVITY_SERVICE

FRAGMENTS = [
    fragment(
        A.MODULE, "Network Layer", INFO,
        imports="import 'package:internet_connection_checker/internet_connection_checker.dart';",
        body="""
/// Interface for checking network connectivity.
abstract class NetworkInfo {
  Future<bool> get isConnected;
}

/// [NetworkInfo] backed by internet_connection_checker.
class NetworkInfoImpl implements NetworkInfo {
  final InternetConnectionChecker connectionChecker;

  NetworkInfoImpl(this.connectionChecker);

  @override
  Future<bool> get isConnected => connectionChecker.hasConnection;
}
""",
    ),
    fragment(
        A.MODULE, "Network Layer", CONNECTIVITY,
        imports="""
import 'dart:async';
import 'package:connectivity_plus/connectivity_plus.dart';
""",
        body="""
/// Watches the device connectivity and exposes it as a stream of booleans.
class ConnectivityService {
  static final ConnectivityService _instance = ConnectivityService._internal();

  factory ConnectivityService() => _instance;

  ConnectivityService._internal() {
    _connectivity.onConnectivityChanged.listen((results) {
      _connectionStatusController.add(_isOnline(results));
    });
  }

  final Connectivity _connectivity = Connectivity();
  final StreamController<bool> _connectionStatusController =
      StreamController<bool>.broadcast();

  /// Emits `true` when the device is online, `false` when it goes offline.
  Stream<bool> get connectionStatusStream => _connectionStatusController.stream;

  /// Checks the current connection once.
  Future<bool> isConnected() async {
    return _isOnline(await _connectivity.checkConnectivity());
  }

  bool _isOnline(List<ConnectivityResult> results) {
    return results.any((result) => result != ConnectivityResult.none);
  }

  void dispose() {
    _connectionStatusController.close();
  }
}
""",
    ),
]
