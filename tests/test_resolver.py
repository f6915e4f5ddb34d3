"""Tests for the axis resolver (flutter_scaffold.resolver).

Covers:
- Precedence: core, compound rules, architecture, state, features, modules
- Compound predicates and suppression
- Mandatory versus conditional target files
- Re-validation of unvalidated configurations
- Cross-product of every architecture and state-management value with
  feature and module subsets
"""

from __future__ import annotations

import itertools

import pytest

from flutter_scaffold.catalog import AxisKind, FileKind, default_catalog
from flutter_scaffold.composer import compose_all
from flutter_scaffold.config import Architecture, Feature, Module, ScaffoldConfig, StateManagement
from flutter_scaffold.errors import InvalidConfiguration
from flutter_scaffold.resolver import active_terms, resolve


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


def _keys(selection, target):
    return [(f.axis, f.key) for f in selection.fragments(target)]


# ---------------------------------------------------------------------------
# Precedence and suppression (hand-built catalog)
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_features_follow_declared_order(self, tiny_catalog):
        config = ScaffoldConfig.create(project_name="demo", features=["Settings"], modules=[])
        selection = resolve(config, tiny_catalog)
        assert _keys(selection, FileKind.ROUTE_CONSTANTS) == [
            (AxisKind.CORE, "home"),
            (AxisKind.FEATURE, "Settings"),
        ]

    def test_core_then_module(self, tiny_catalog):
        config = ScaffoldConfig.create(project_name="demo", modules=["Localization"])
        selection = resolve(config, tiny_catalog)
        assert _keys(selection, FileKind.MANIFEST) == [
            (AxisKind.CORE, "packages"),
            (AxisKind.MODULE, "Localization"),
        ]

    def test_compound_suppresses_single_axis_fragment(self, tiny_catalog):
        config = ScaffoldConfig.create(
            project_name="demo", features=["Dashboard", "Settings"], modules=[]
        )
        selection = resolve(config, tiny_catalog)
        assert selection.active_rules == ("Settings+Dashboard",)
        assert (AxisKind.FEATURE, "Dashboard", FileKind.ROUTE_CONSTANTS) in selection.suppressed
        assert _keys(selection, FileKind.ROUTE_CONSTANTS) == [
            (AxisKind.CORE, "home"),
            (AxisKind.COMPOUND, "Settings+Dashboard"),
            (AxisKind.FEATURE, "Settings"),
        ]

    def test_compound_inactive_when_predicate_partial(self, tiny_catalog):
        config = ScaffoldConfig.create(project_name="demo", features=["Dashboard"], modules=[])
        selection = resolve(config, tiny_catalog)
        assert selection.active_rules == ()
        assert (AxisKind.FEATURE, "Dashboard") in _keys(selection, FileKind.ROUTE_CONSTANTS)

    def test_positions_come_from_catalog(self, tiny_catalog):
        config = ScaffoldConfig.create(project_name="demo", features=["Dashboard"], modules=[])
        spec = resolve(config, tiny_catalog)[FileKind.ROUTE_CONSTANTS]
        for frag in spec.fragments:
            assert spec.positions[frag.identity] == tiny_catalog.position(frag)


class TestTargets:
    def test_mandatory_files_always_present(self, minimal_config):
        selection = resolve(minimal_config)
        for target in (
            FileKind.ENTRYPOINT,
            FileKind.MANIFEST,
            FileKind.APP_WIDGET,
            FileKind.SHOWCASE_SCREEN,
            FileKind.OBSERVABILITY,
            FileKind.ROUTE_CONSTANTS,
        ):
            assert target in selection

    def test_network_di_only_with_clean_and_network(self, minimal_config):
        assert FileKind.NETWORK_DI not in resolve(minimal_config)
        with_network = ScaffoldConfig.create(
            project_name="demo", architecture="Clean Architecture", modules=["Network Layer"]
        )
        assert FileKind.NETWORK_DI in resolve(with_network)
        mvvm = ScaffoldConfig.create(
            project_name="demo", architecture="MVVM", modules=["Network Layer"]
        )
        selection = resolve(mvvm)
        assert FileKind.NETWORK_DI not in selection
        assert FileKind.INJECTION not in selection

    def test_targets_follow_file_kind_order(self, full_config):
        targets = resolve(full_config).targets()
        assert targets == [t for t in FileKind if t in targets]


class TestSupportFiles:
    def test_network_layer_brings_its_services(self, minimal_config):
        assert FileKind.NETWORK_INFO not in resolve(minimal_config)
        config = ScaffoldConfig.create(project_name="demo", architecture="MVC", modules=["Network Layer"])
        selection = resolve(config)
        assert FileKind.NETWORK_INFO in selection
        assert FileKind.CONNECTIVITY_SERVICE in selection

    @pytest.mark.parametrize("state", ["Provider", "Riverpod", "Bloc", "GetX", "MobX"])
    def test_theme_and_locale_controllers_per_state(self, state):
        config = ScaffoldConfig.create(
            project_name="demo",
            state_management=state,
            modules=["Theme Manager", "Localization"],
        )
        selection = resolve(config)
        for target in (
            FileKind.APP_THEME,
            FileKind.THEME_CONTROLLER,
            FileKind.LOCALIZATIONS,
            FileKind.LOCALE_CONTROLLER,
        ):
            assert target in selection, target
        assert FileKind.REDUX_STATE not in selection
        keys = _keys(selection, FileKind.THEME_CONTROLLER)
        assert keys == [(AxisKind.COMPOUND, f"{state}+Theme Manager")]

    def test_redux_keeps_theme_and_locale_in_its_store(self):
        config = ScaffoldConfig.create(
            project_name="demo",
            state_management="Redux",
            features=["Settings"],
            modules=["Theme Manager", "Localization"],
        )
        selection = resolve(config)
        assert FileKind.THEME_CONTROLLER not in selection
        assert FileKind.LOCALE_CONTROLLER not in selection
        assert _keys(selection, FileKind.REDUX_STATE) == [
            (AxisKind.COMPOUND, "Redux+Theme Manager"),
            (AxisKind.COMPOUND, "Redux+Localization"),
            (AxisKind.STATE_MANAGEMENT, "Redux"),
        ]

    def test_locator_only_for_mvvm(self, minimal_config):
        assert FileKind.LOCATOR not in resolve(minimal_config)
        mvvm = ScaffoldConfig.create(project_name="demo", architecture="MVVM")
        assert FileKind.LOCATOR in resolve(mvvm)


class TestDefaultCatalogRules:
    def test_authentication_and_push_share_one_firebase_init(self):
        config = ScaffoldConfig.create(
            project_name="demo",
            features=["Authentication"],
            modules=["Push Notification"],
        )
        selection = resolve(config)
        assert "Authentication+Push Notification" in selection.active_rules
        keys = _keys(selection, FileKind.ENTRYPOINT)
        assert (AxisKind.MODULE, "Push Notification") not in keys
        assert (AxisKind.FEATURE, "Authentication") in keys

    def test_theme_manager_replaces_default_theme(self):
        config = ScaffoldConfig.create(project_name="demo", modules=["Theme Manager"])
        keys = _keys(resolve(config), FileKind.APP_WIDGET)
        assert (AxisKind.CORE, "default_theme") not in keys
        assert (AxisKind.COMPOUND, "Theme Manager+App Theme") in keys
        assert (AxisKind.COMPOUND, "Provider+Theme Manager") in keys

    def test_state_binding_follows_state(self):
        config = ScaffoldConfig.create(
            project_name="demo", state_management="GetX", modules=["Localization"]
        )
        keys = _keys(resolve(config), FileKind.APP_WIDGET)
        assert (AxisKind.COMPOUND, "GetX+Localization") in keys
        assert (AxisKind.COMPOUND, "Provider+Localization") not in keys

    def test_active_terms(self, full_config):
        terms = active_terms(full_config)
        assert (AxisKind.ARCHITECTURE, "Clean Architecture") in terms
        assert (AxisKind.STATE_MANAGEMENT, "Bloc") in terms
        assert (AxisKind.MODULE, "Theme Manager") in terms
        assert len(terms) == 2 + 4 + 5


class TestRevalidation:
    def test_unvalidated_config_rejected(self):
        bogus = ScaffoldConfig.model_construct(
            project_name="demo",
            organization="com.example.app",
            architecture=Architecture.CLEAN,
            state_management="Vuex",
            features=(),
            modules=(),
        )
        with pytest.raises(InvalidConfiguration):
            resolve(bogus)

    def test_mapping_accepted(self):
        selection = resolve({"project_name": "demo", "state_management": "MobX"})
        assert selection.config.state_management is StateManagement.MOBX

    def test_mapping_with_unknown_module_rejected(self):
        with pytest.raises(InvalidConfiguration):
            resolve({"project_name": "demo", "modules": ["Blockchain"]})


# ---------------------------------------------------------------------------
# Cross-product
# ---------------------------------------------------------------------------


def _module_subsets():
    modules = list(Module)
    for size in (0, 1, 2, len(modules)):
        yield from itertools.combinations(modules, size)


def _feature_subsets():
    # An empty selection falls back to the default feature.
    yield ()
    yield from ((feature,) for feature in Feature)
    yield tuple(Feature)


@pytest.mark.parametrize("state", list(StateManagement))
@pytest.mark.parametrize("architecture", list(Architecture))
def test_every_combination_composes(state, architecture):
    """No slot clash and no empty required section for any combination."""
    catalog = default_catalog()
    for features, modules in itertools.product(_feature_subsets(), _module_subsets()):
        config = ScaffoldConfig.create(
            project_name="combo",
            architecture=architecture,
            state_management=state,
            features=list(features),
            modules=list(modules),
        )
        selection = resolve(config, catalog)
        shared_firebase = (
            config.has_feature(Feature.AUTHENTICATION)
            and config.has_module(Module.PUSH_NOTIFICATION)
        )
        assert ("Authentication+Push Notification" in selection.active_rules) == shared_firebase
        for spec in selection.files.values():
            slots = [f.slot for f in spec.fragments if f.slot]
            assert len(slots) == len(set(slots)), (config, spec.target)
        compositions = compose_all(selection)
        assert all(c.ok for c in compositions), [c.error for c in compositions if not c.ok]
        main = next(c.text for c in compositions if c.target is FileKind.ENTRYPOINT)
        uses_firebase = config.has_feature(Feature.AUTHENTICATION) or config.has_module(
            Module.PUSH_NOTIFICATION
        )
        assert main.count("Firebase.initializeApp(") == int(uses_firebase)
