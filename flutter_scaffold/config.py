"""Scaffolder configuration.

Two models live here:

* ``ScaffoldConfig`` -- the immutable record of user-chosen axes (architecture,
  state management, features, modules) plus project identity.  It is created
  once per run and every downstream decision is a pure function of it.
* ``Settings`` -- knobs for the tool itself (output directory, overwrite
  policy), loadable from environment variables.

Both use Pydantic v2 so invalid input is rejected at construction time.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfiguration


# ---------------------------------------------------------------------------
# Axis enumerations
# ---------------------------------------------------------------------------

class Architecture(str, Enum):
    """Architecture pattern of the generated application."""
    CLEAN = "Clean Architecture"
    MVVM = "MVVM"
    MVC = "MVC"


class StateManagement(str, Enum):
    """State-management library wired into the application root."""
    PROVIDER = "Provider"
    RIVERPOD = "Riverpod"
    BLOC = "Bloc"
    GETX = "GetX"
    MOBX = "MobX"
    REDUX = "Redux"


class Feature(str, Enum):
    """Feature screens that can be toggled on."""
    AUTHENTICATION = "Authentication"
    USER_PROFILE = "User Profile"
    SETTINGS = "Settings"
    DASHBOARD = "Dashboard"


class Module(str, Enum):
    """Infrastructure modules that can be toggled on."""
    NETWORK_LAYER = "Network Layer"
    LOCAL_STORAGE = "Local Storage"
    LOCALIZATION = "Localization"
    PUSH_NOTIFICATION = "Push Notification"
    THEME_MANAGER = "Theme Manager"


DEFAULT_FEATURE = Feature.AUTHENTICATION

_PROJECT_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]*$")
_ORGANIZATION_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)+$")


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ScaffoldConfig(BaseModel):
    """Immutable description of the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Dart package name of the generated app")
    organization: str = Field(
        default="com.example.app", description="Bundle identifier, reverse-DNS form"
    )
    architecture: Architecture = Field(default=Architecture.CLEAN)
    state_management: StateManagement = Field(default=StateManagement.PROVIDER)
    features: tuple[Feature, ...] = Field(
        default=(DEFAULT_FEATURE,), description="Enabled features, in declared order"
    )
    modules: tuple[Module, ...] = Field(
        default=(Module.NETWORK_LAYER,), description="Enabled modules, in declared order"
    )

    # -- Validators --------------------------------------------------------

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not _PROJECT_NAME_RE.match(value):
            raise ValueError(
                "must start with a lowercase letter or underscore and contain only "
                "lowercase letters, digits and underscores"
            )
        return value

    @field_validator("organization")
    @classmethod
    def _check_organization(cls, value: str) -> str:
        if not _ORGANIZATION_RE.match(value):
            raise ValueError("must be a reverse-DNS identifier such as 'com.example.app'")
        return value

    @field_validator("state_management", mode="before")
    @classmethod
    def _single_state_management(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            if len(value) != 1:
                raise ValueError(
                    f"exactly one state-management library must be chosen, got {len(value)}"
                )
            return next(iter(value))
        return value

    @field_validator("features", "modules", mode="before")
    @classmethod
    def _ordered_sequence(cls, value: Any) -> Any:
        if isinstance(value, (set, frozenset)):
            raise ValueError("must be an ordered sequence, not a set")
        if isinstance(value, (str, Enum)):
            return (value,)
        return value

    @field_validator("features", "modules")
    @classmethod
    def _dedupe(cls, value: tuple[Enum, ...]) -> tuple[Enum, ...]:
        # First occurrence wins so the declared order stays stable.
        return tuple(dict.fromkeys(value))

    @field_validator("features")
    @classmethod
    def _default_feature(cls, value: tuple[Feature, ...]) -> tuple[Feature, ...]:
        return value or (DEFAULT_FEATURE,)

    # -- Construction ------------------------------------------------------

    @classmethod
    def create(cls, **data: Any) -> "ScaffoldConfig":
        """Validate raw values and build a config.

        Raises:
            InvalidConfiguration: If any field fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _invalid(exc) from exc

    @classmethod
    def load(cls, path: str | Path) -> "ScaffoldConfig":
        """Load a configuration previously written by :meth:`save`."""
        raw = Path(path).read_text(encoding="utf-8")
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise _invalid(exc) from exc

    def save(self, path: str | Path) -> Path:
        """Persist the configuration as JSON and return the written path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    # -- Derived values ----------------------------------------------------

    @property
    def android_application_id(self) -> str:
        return self.organization.replace("_", "").lower()

    @property
    def ios_application_id(self) -> str:
        return self.organization.replace("_", "").lower()

    def has_feature(self, feature: Feature) -> bool:
        return feature in self.features

    def has_module(self, module: Module) -> bool:
        return module in self.modules

    def render_context(self) -> dict[str, Any]:
        """Build the Jinja2 context every fragment body is rendered against."""
        return {
            "project_name": self.project_name,
            "organization": self.organization,
            "architecture": self.architecture.value,
            "state_management": self.state_management.value,
            "features": [f.value for f in self.features],
            "modules": [m.value for m in self.modules],
            "android_application_id": self.android_application_id,
            "ios_application_id": self.ios_application_id,
        }


def _invalid(exc: ValidationError) -> InvalidConfiguration:
    fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )
    return InvalidConfiguration(f"Invalid configuration -- {details}", fields=fields)


# ---------------------------------------------------------------------------
# Tool settings
# ---------------------------------------------------------------------------

class Settings(BaseModel):
    """Settings for a generator invocation (not part of the generated project)."""

    output_dir: Path = Field(default=Path("./output"))
    overwrite: bool = Field(
        default=False, description="Replace files that already exist on create"
    )
    run_patches: bool = Field(
        default=True, description="Run the re-entrant patch pass after creation"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            FLUTTER_SCAFFOLD_OUTPUT_DIR, FLUTTER_SCAFFOLD_OVERWRITE,
            FLUTTER_SCAFFOLD_SKIP_PATCHES.
        """
        return cls(
            output_dir=Path(os.environ.get("FLUTTER_SCAFFOLD_OUTPUT_DIR") or "./output"),
            overwrite=_env_flag("FLUTTER_SCAFFOLD_OVERWRITE"),
            run_patches=not _env_flag("FLUTTER_SCAFFOLD_SKIP_PATCHES"),
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")
