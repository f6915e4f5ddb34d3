"""Command-line entry point.

Usage::

    flutter-scaffold create my_app --state-management Bloc --module "Network Layer"
    flutter-scaffold extend ./output/my_app --config my_app.json
    flutter-scaffold catalog
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import Any, Optional, Sequence

from .catalog.registry import default_catalog
from .config import Architecture, Feature, Module, ScaffoldConfig, Settings, StateManagement
from .errors import ScaffoldError
from .generator import GenerationReport, ScaffoldGenerator
from .materializer import Materializer
from .utils import (
    console,
    format_duration,
    print_catalog,
    print_error,
    print_header,
    print_report,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
)

CONFIG_FILENAME = ".flutter_scaffold.json"


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flutter-scaffold",
        description="Flutter project scaffolder -- compose a project from architecture, "
        "state management, features and modules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  flutter-scaffold create my_app\n"
            "  flutter-scaffold create my_app --architecture MVVM --state-management Riverpod\n"
            "  flutter-scaffold create shop --feature Dashboard --module 'Local Storage' -o ./apps\n"
            "  flutter-scaffold extend ./output/my_app --module Localization\n"
            "  flutter-scaffold extend ./output/my_app --module 'Network Layer' --create-missing\n"
            "  flutter-scaffold catalog\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Generate a new project")
    create.add_argument("name", nargs="?", default=None, help="Project name")
    _add_axis_arguments(create)
    create.add_argument(
        "--output", "-o",
        default=None,
        help="Parent output directory (default: $FLUTTER_SCAFFOLD_OUTPUT_DIR or ./output)",
    )
    create.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace files that already exist",
    )
    create.add_argument(
        "--skip-patches",
        action="store_true",
        help="Do not run the patch pass after writing files",
    )

    extend = sub.add_parser("extend", help="Patch an existing project up to date")
    extend.add_argument("project_dir", help="Root of a previously generated project")
    _add_axis_arguments(extend)
    extend.add_argument(
        "--create-missing",
        action="store_true",
        help="Create files the configuration produces but the project lacks",
    )

    sub.add_parser("catalog", help="List axes and catalog contents")
    return parser


def _add_axis_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (command-line values override it)",
    )
    parser.add_argument("--org", default=None, help="Organization, e.g. com.example.app")
    parser.add_argument(
        "--architecture", "-a",
        default=None,
        choices=[a.value for a in Architecture],
    )
    parser.add_argument(
        "--state-management", "-s",
        default=None,
        choices=[s.value for s in StateManagement],
    )
    parser.add_argument(
        "--feature", "-f",
        action="append",
        default=None,
        choices=[f.value for f in Feature],
        help="Enable a feature (repeatable)",
    )
    parser.add_argument(
        "--module", "-m",
        action="append",
        default=None,
        choices=[m.value for m in Module],
        help="Enable a module (repeatable)",
    )


# ---------------------------------------------------------------------------
# Config assembly
# ---------------------------------------------------------------------------


def config_from_args(args: argparse.Namespace, fallback: Optional[Path] = None) -> ScaffoldConfig:
    """Merge a config file (``--config`` or *fallback*) with command-line values.

    With a *fallback* (the ``extend`` command), ``--feature`` and ``--module``
    add to the saved selection instead of replacing it.

    Raises:
        InvalidConfiguration: The merged values do not validate.
        FileNotFoundError: ``--config`` names a missing file.
    """
    data: dict[str, Any] = {}
    source = Path(args.config) if args.config else fallback
    if source is not None and (args.config or source.exists()):
        data = ScaffoldConfig.load(source).model_dump()

    name = getattr(args, "name", None)
    if name:
        data["project_name"] = sanitize_name(name)
    elif "project_name" not in data and fallback is not None:
        data["project_name"] = sanitize_name(fallback.parent.name)

    overrides = {
        "organization": args.org,
        "architecture": args.architecture,
        "state_management": args.state_management,
        "features": args.feature,
        "modules": args.module,
    }
    if fallback is not None:
        # extend adds to what the project already has
        for key in ("features", "modules"):
            if overrides[key] is not None:
                overrides[key] = [*data.get(key, ()), *overrides[key]]
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ScaffoldConfig.create(**data)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _print_config(config: ScaffoldConfig) -> None:
    print_summary_table(
        {
            "Project": config.project_name,
            "Organization": config.organization,
            "Architecture": config.architecture.value,
            "State management": config.state_management.value,
            "Features": ", ".join(f.value for f in config.features),
            "Modules": ", ".join(m.value for m in config.modules) or "-",
        },
        title="Configuration",
    )


def _finish(report: GenerationReport, started: float, verb: str) -> int:
    print_report(report)
    elapsed = format_duration(time.monotonic() - started)
    if report.failed_compositions:
        print_error(f"{verb} finished with errors in {elapsed}.")
        return 1
    if report.manual_followups:
        print_warning(
            f"{verb} finished in {elapsed}; {len(report.manual_followups)} "
            "change(s) need manual follow-up."
        )
        return 0
    print_success(f"{verb} completed in {elapsed}: {report.project_root}")
    return 0


def run_create(args: argparse.Namespace, settings: Settings) -> int:
    if not args.name and not args.config:
        print_error("Error: a project name or --config file is required")
        return 1
    config = config_from_args(args)
    print_header(f"Creating {config.project_name}")
    _print_config(config)

    output_dir = Path(args.output) if args.output else settings.output_dir
    overwrite = args.overwrite or settings.overwrite
    run_patches = settings.run_patches and not args.skip_patches

    started = time.monotonic()
    generator = ScaffoldGenerator(config, materializer=Materializer(overwrite=overwrite))
    report = asyncio.run(generator.generate(output_dir, run_patches=run_patches))
    if not report.failed_compositions:
        config.save(report.project_root / CONFIG_FILENAME)
    return _finish(report, started, "Generation")


def run_extend(args: argparse.Namespace) -> int:
    root = Path(args.project_dir).resolve()
    if not root.is_dir():
        print_error(f"Error: project directory not found: {root}")
        return 1
    saved = root / CONFIG_FILENAME
    config = config_from_args(args, fallback=saved)
    print_header(f"Extending {config.project_name}")
    _print_config(config)

    started = time.monotonic()
    generator = ScaffoldGenerator(config)
    report = asyncio.run(generator.extend(root, create_missing=args.create_missing))
    config.save(saved)
    return _finish(report, started, "Extension")


def run_catalog() -> int:
    print_header("Catalog")
    axes = {
        "architecture": [a.value for a in Architecture],
        "state management": [s.value for s in StateManagement],
        "features": [f.value for f in Feature],
        "modules": [m.value for m in Module],
    }
    print_catalog(default_catalog(), axes)
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``flutter-scaffold`` and ``python -m flutter_scaffold``."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()

    try:
        if args.command == "create":
            code = run_create(args, settings)
        elif args.command == "extend":
            code = run_extend(args)
        else:
            code = run_catalog()
    except (ScaffoldError, FileNotFoundError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
