"""CLI entry point: z-deps.

Subcommands:
    z-deps discover /path/to/repo            # List module manifests
    z-deps analyze /path/to/module --json    # Resolved dependency graph
    z-deps is-built /path/to/module          # Exit 0 if built, 2 if not
    z-deps root /path/inside/project         # Nearest directory with a pom.xml
    z-deps builders                          # Supported build tools
"""

from __future__ import annotations

import json
import sys

import click

from z_dep_discovery.builders.maven import MavenBuilder
from z_dep_discovery.builders.registry import create_default_registry
from z_dep_discovery.config import Settings
from z_dep_discovery.core.logging import setup_logging
from z_dep_discovery.exceptions import DiscoveryError
from z_dep_discovery.models.dependency import Dependency
from z_dep_discovery.schemas import AnalysisReport, DependencySchema, ManifestSchema

EXIT_NOT_BUILT = 2


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _print_deps(deps: list[Dependency]) -> None:
    if not deps:
        click.echo("No dependencies found.")
        return
    click.echo(f"Found {len(deps)} dependencies\n")
    for d in sorted(deps, key=lambda d: d.package):
        click.echo(f"  {d.package} {d.revision}")
        for path in d.via:
            click.echo(f"    via {path}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """z-deps: discover Maven modules and their resolved dependency graphs."""
    settings = _load_settings()
    setup_logging(settings, verbose=verbose)
    ctx.obj = settings


@main.command("discover")
@click.argument("root_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def discover(settings: Settings, root_dir: str, as_json: bool) -> None:
    """List module manifests under ROOT_DIR."""
    try:
        records = MavenBuilder(settings).discover_modules(root_dir)
    except OSError as e:
        _fail(e)
        return
    if as_json:
        rows = [ManifestSchema.from_record(r).model_dump() for r in records]
        click.echo(json.dumps(rows, indent=2))
        return
    if not records:
        click.echo("No modules found.")
        return
    for r in records:
        click.echo(f"  {r.name}  ({r.type})  {r.path}")


@main.command("analyze")
@click.argument("module_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--build/--no-build", default=False, help="Build the module before analysis")
@click.option("--force", is_flag=True, help="Clean before building (implies --build)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def analyze(settings: Settings, module_dir: str, build: bool, force: bool, as_json: bool) -> None:
    """Print the resolved dependencies of the module in MODULE_DIR."""
    builder = MavenBuilder(settings)
    try:
        builder.initialize()
        if build or force:
            builder.build(module_dir, force=force)
        deps = builder.analyze(module_dir)
    except DiscoveryError as e:
        _fail(e)
        return

    if as_json:
        report = AnalysisReport(
            module_dir=module_dir,
            builder=builder.type_tag,
            dependencies=[DependencySchema.from_dependency(d) for d in deps],
        )
        click.echo(report.model_dump_json(indent=2))
        return
    _print_deps(deps)


@main.command("is-built")
@click.argument("module_dir", type=click.Path(exists=True, file_okay=False))
@click.pass_obj
def is_built(settings: Settings, module_dir: str) -> None:
    """Exit 0 if MODULE_DIR is built, 2 if it is not."""
    builder = MavenBuilder(settings)
    try:
        builder.initialize()
        built = builder.is_built(module_dir)
    except DiscoveryError as e:
        _fail(e)
        return
    click.echo("built" if built else "not built")
    if not built:
        sys.exit(EXIT_NOT_BUILT)


@main.command("root")
@click.argument("path", type=click.Path(exists=True))
@click.pass_obj
def root(settings: Settings, path: str) -> None:
    """Print the nearest directory at or above PATH holding a pom.xml."""
    try:
        found = MavenBuilder(settings).find_project_root(path)
    except OSError as e:
        _fail(e)
        return
    if found is None:
        click.echo(f"No pom.xml found above {path}", err=True)
        sys.exit(1)
    click.echo(found)


@main.command("builders")
def builders() -> None:
    """List supported build tools and the manifests they look for."""
    for desc in create_default_registry().list_all():
        click.echo(f"  {desc.type_tag:<8} {desc.display_name}  ({', '.join(desc.manifest_names)})")


if __name__ == "__main__":
    main()
