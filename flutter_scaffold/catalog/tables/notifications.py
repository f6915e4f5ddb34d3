"""Fragments for ``lib/core/notifications/notification_handler.dart``."""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.NOTIFICATION_HANDLER

FRAGMENTS = [
    fragment(
        A.MODULE, "Push Notification", T,
        imports="""
import 'package:firebase_messaging/firebase_messaging.dart';
import 'package:flutter/foundation.dart';
import 'package:flutter_local_notifications/flutter_local_notifications.dart';
""",
        body="""
/// Handles messages delivered while the app is in the background.
@pragma('vm:entry-point')
Future<void> firebaseMessagingBackgroundHandler(RemoteMessage message) async {
  debugPrint('Handling a background message: ${message.messageId}');
}

/// Firebase Cloud Messaging plus local notifications for foreground messages.
class NotificationHandler {
  final FirebaseMessaging _messaging = FirebaseMessaging.instance;
  final FlutterLocalNotificationsPlugin _localNotifications =
      FlutterLocalNotificationsPlugin();

  static const AndroidNotificationChannel _channel = AndroidNotificationChannel(
    'high_importance_channel',
    'High Importance Notifications',
    importance: Importance.high,
  );

  /// Requests permissions and wires up message listeners.
  Future<void> initialize() async {
    await _messaging.requestPermission(alert: true, badge: true, sound: true);

    await _localNotifications.initialize(
      const InitializationSettings(
        android: AndroidInitializationSettings('@mipmap/ic_launcher'),
        iOS: DarwinInitializationSettings(),
      ),
    );
    await _localNotifications
        .resolvePlatformSpecificImplementation<
            AndroidFlutterLocalNotificationsPlugin>()
        ?.createNotificationChannel(_channel);

    FirebaseMessaging.onBackgroundMessage(firebaseMessagingBackgroundHandler);
    FirebaseMessaging.onMessage.listen(_showForegroundMessage);
    _messaging.onTokenRefresh.listen((token) {
      debugPrint('FCM token refreshed: $token');
    });
  }

  /// The FCM registration token of this device.
  Future<String?> getToken() => _messaging.getToken();

  Future<void> subscribeToTopic(String topic) => _messaging.subscribeToTopic(topic);

  Future<void> unsubscribeFromTopic(String topic) =>
      _messaging.unsubscribeFromTopic(topic);

  Future<void> _showForegroundMessage(RemoteMessage message) async {
    final notification = message.notification;
    if (notification == null) return;
    await _localNotifications.show(
      notification.hashCode,
      notification.title,
      notification.body,
      NotificationDetails(
        android: AndroidNotificationDetails(_channel.id, _channel.name),
        iOS: const DarwinNotificationDetails(),
      ),
    );
  }
}

/// Global notification handler instance.
final notificationHandler = NotificationHandler();
""",
    ),
]
