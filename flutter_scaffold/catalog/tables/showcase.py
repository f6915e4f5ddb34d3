"""Fragments for ``lib/app/app_showcase.dart``, the generated landing screen."""

from __future__ import annotations

from ..models import AxisKind as A
from ..models import FileKind, fragment

T = FileKind.SHOWCASE_SCREEN

FRAGMENTS = [
    fragment(
        A.CORE, "overview", T,
        order=0,
        imports="import 'package:flutter/material.dart';",
        child="""
Card(
  child: Padding(
    padding: const EdgeInsets.all(16),
    child: Column(
      crossAxisAlignment: CrossAxisAlignment.start,
      children: [
        Text(
          '{{ project_name | pascal_case }}',
          style: Theme.of(context).textTheme.headlineSmall,
        ),
        const SizedBox(height: 8),
        const Text('Architecture: {{ architecture }}'),
        const Text('State management: {{ state_management }}'),
        const SizedBox(height: 8),
{% for feature in features %}
        const Chip(label: Text('{{ feature }}')),
{% endfor %}
      ],
    ),
  ),
),
""",
    ),
    fragment(
        A.MODULE, "Theme Manager", T,
        order=10,
        body="""
  ThemeMode _previewMode = ThemeMode.system;
""",
        child="""
ListTile(
  leading: const Icon(Icons.palette_outlined),
  title: const Text('Theme preview'),
  trailing: SegmentedButton<ThemeMode>(
    segments: const [
      ButtonSegment(value: ThemeMode.light, icon: Icon(Icons.light_mode)),
      ButtonSegment(value: ThemeMode.system, icon: Icon(Icons.brightness_auto)),
      ButtonSegment(value: ThemeMode.dark, icon: Icon(Icons.dark_mode)),
    ],
    selected: {_previewMode},
    onSelectionChanged: (modes) => setState(() => _previewMode = modes.first),
  ),
),
""",
    ),
    fragment(
        A.MODULE, "Localization", T,
        order=20,
        child="""
ListTile(
  leading: const Icon(Icons.translate),
  title: const Text('Current locale'),
  subtitle: Text(Localizations.localeOf(context).toString()),
),
""",
    ),
    fragment(
        A.MODULE, "Network Layer", T,
        order=30,
        imports="import 'package:{{ project_name }}/core/network/services/connectivity_service.dart';",
        child="""
StreamBuilder<bool>(
  stream: ConnectivityService().connectionStatusStream,
  builder: (context, snapshot) => ListTile(
    leading: const Icon(Icons.wifi),
    title: const Text('Connectivity'),
    subtitle: Text(snapshot.data == false ? 'Offline' : 'Online'),
  ),
),
""",
    ),
    fragment(
        A.MODULE, "Local Storage", T,
        order=40,
        child="""
const ListTile(
  leading: Icon(Icons.storage),
  title: Text('Local storage'),
  subtitle: Text('Hive boxes are opened on startup'),
),
""",
    ),
    fragment(
        A.MODULE, "Push Notification", T,
        order=50,
        imports="import 'package:{{ project_name }}/core/notifications/notification_handler.dart';",
        body="""
  String? _fcmToken;

  @override
  void initState() {
    super.initState();
    notificationHandler.getToken().then((token) {
      if (mounted) setState(() => _fcmToken = token);
    });
  }
""",
        child="""
ListTile(
  leading: const Icon(Icons.notifications_active_outlined),
  title: const Text('Push token'),
  subtitle: Text(_fcmToken ?? 'Waiting for token...'),
),
""",
    ),
]
