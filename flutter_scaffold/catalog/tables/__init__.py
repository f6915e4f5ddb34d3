"""Bundled fragment tables, one module per generated file family."""

from __future__ import annotations

from . import (
    app_widget,
    entrypoint,
    localization,
    manifest,
    network,
    notifications,
    observability,
    redux,
    routing,
    showcase,
    theming,
)

ALL_FRAGMENTS = [
    *entrypoint.FRAGMENTS,
    *manifest.FRAGMENTS,
    *app_widget.FRAGMENTS,
    *showcase.FRAGMENTS,
    *observability.FRAGMENTS,
    *routing.FRAGMENTS,
    *network.FRAGMENTS,
    *notifications.FRAGMENTS,
    *theming.FRAGMENTS,
    *localization.FRAGMENTS,
    *redux.FRAGMENTS,
]

__all__ = ["ALL_FRAGMENTS"]
