"""Shared pytest fixtures for the flutter-scaffold test suite.

Provides reusable fixtures for:
- Representative configurations (minimal, full, per-state-management)
- Output directories for generated projects
- A small hand-built catalog for composer/resolver edge cases
"""

from __future__ import annotations

from pathlib import Path

import pytest

from flutter_scaffold.catalog.models import AxisKind, FileKind, fragment
from flutter_scaffold.catalog.registry import FragmentCatalog
from flutter_scaffold.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def minimal_config() -> ScaffoldConfig:
    """Clean Architecture + Provider, default feature, no modules."""
    return ScaffoldConfig.create(
        project_name="demo_app",
        architecture="Clean Architecture",
        state_management="Provider",
        features=["Authentication"],
        modules=[],
    )


@pytest.fixture
def full_config() -> ScaffoldConfig:
    """Every feature and every module enabled, with Bloc."""
    return ScaffoldConfig.create(
        project_name="full_app",
        organization="com.acme.full",
        architecture="Clean Architecture",
        state_management="Bloc",
        features=["Authentication", "User Profile", "Settings", "Dashboard"],
        modules=[
            "Network Layer",
            "Local Storage",
            "Localization",
            "Push Notification",
            "Theme Manager",
        ],
    )


@pytest.fixture
def redux_config() -> ScaffoldConfig:
    return ScaffoldConfig.create(
        project_name="redux_app",
        architecture="MVC",
        state_management="Redux",
        features=["Settings"],
        modules=["Theme Manager"],
    )


@pytest.fixture
def getx_config() -> ScaffoldConfig:
    return ScaffoldConfig.create(
        project_name="getx_app",
        architecture="MVVM",
        state_management="GetX",
        features=["Dashboard"],
        modules=["Localization", "Theme Manager"],
    )


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory projects are generated into (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


# ---------------------------------------------------------------------------
# Hand-built catalogs
# ---------------------------------------------------------------------------


@pytest.fixture
def tiny_catalog() -> FragmentCatalog:
    """A small catalog that only produces route constants and a manifest."""
    routes = FileKind.ROUTE_CONSTANTS
    manifest = FileKind.MANIFEST
    return FragmentCatalog(
        [
            fragment(AxisKind.CORE, "home", routes, order=0,
                     body="  static const String home = '/';"),
            fragment(AxisKind.FEATURE, "Settings", routes, order=30,
                     body="  static const String settings = '/settings';"),
            fragment(AxisKind.FEATURE, "Dashboard", routes, order=20,
                     body="  static const String dashboard = '/dashboard';"),
            fragment(AxisKind.CORE, "packages", manifest,
                     dependency="  intl: any"),
            fragment(AxisKind.MODULE, "Localization", manifest,
                     dependency="  intl: ^0.19.0\n  easy_localization: ^3.0.3"),
            fragment(
                AxisKind.COMPOUND, "Settings+Dashboard", routes,
                requires=((AxisKind.FEATURE, "Settings"), (AxisKind.FEATURE, "Dashboard")),
                suppresses=((AxisKind.FEATURE, "Dashboard", routes),),
                order=25,
                body="  static const String dashboardSettings = '/dashboard/settings';",
            ),
        ]
    )
