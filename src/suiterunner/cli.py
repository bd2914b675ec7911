"""Command-line interface for suiterunner."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from suiterunner import __version__
from suiterunner.config import (
    RunnerConfig,
    create_example_config,
    find_config_file,
    get_default_config,
)

console = Console()

EXIT_FAILED = 1
EXIT_FATAL = 2


def print_banner() -> None:
    """Print the suiterunner banner."""
    console.print(
        Panel.fit(
            "[bold blue]suiterunner[/bold blue] - lifecycle test harness",
            subtitle=f"v{__version__}",
        )
    )


def _load_config(config_path: Optional[str], targets: tuple[str, ...]) -> tuple[RunnerConfig, Path]:
    """Load the configuration and return it with its base directory.

    Targets given on the command line replace the configured ones; without
    any config file they run on the default configuration.
    """
    if config_path:
        config = RunnerConfig.from_file(config_path)
        base_dir = Path(config_path).resolve().parent
    else:
        found = find_config_file()
        if found is not None:
            config = RunnerConfig.from_file(found)
            base_dir = found.parent
        elif targets:
            config = get_default_config()
            base_dir = Path.cwd()
        else:
            raise FileNotFoundError(
                "No configuration file found. Create suiterunner.json, "
                "run 'suiterunner init' or pass suite targets"
            )

    if targets:
        config.suites.targets = list(targets)
    return config, base_dir


def _resolve_suites(config: RunnerConfig, base_dir: Path) -> list[type]:
    from suiterunner.core.loader import load_suites

    return load_suites(config.suites.targets, config.suites.search_path, base_dir)


@click.group()
@click.version_option(version=__version__, prog_name="suiterunner")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False),
    help="Path to configuration file (default: suiterunner.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: bool) -> None:
    """suiterunner - run tagged test suites in lifecycle order.

    Discovers setup, test and teardown methods on suite classes, runs them
    with optional per-test timeouts and reports every outcome.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default="suiterunner.json",
    help="Output path for configuration file",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing configuration")
@click.pass_context
def init(ctx: click.Context, output: str, force: bool) -> None:
    """Initialize a new suiterunner configuration file."""
    print_banner()

    output_path = Path(output)
    if output_path.exists() and not force:
        console.print(
            f"[yellow]Configuration file already exists:[/yellow] {output_path}"
        )
        console.print("Use --force to overwrite")
        sys.exit(EXIT_FAILED)

    try:
        create_example_config(output_path)
        console.print(f"[green]Created configuration file:[/green] {output_path}")
        console.print("\nNext steps:")
        console.print("  1. List your suite modules under suites.targets")
        console.print("  2. Run [bold]suiterunner list[/bold] to check what was discovered")
        console.print("  3. Run [bold]suiterunner run[/bold] to execute the suites")
    except OSError as e:
        console.print(f"[red]Error creating configuration:[/red] {e}")
        sys.exit(EXIT_FAILED)


@main.command()
@click.argument("targets", nargs=-1)
@click.option(
    "--report/--no-report",
    default=None,
    help="Generate HTML report after the run (default: from configuration)",
)
@click.pass_context
def run(ctx: click.Context, targets: tuple[str, ...], report: Optional[bool]) -> None:
    """Execute suites and report every test outcome.

    TARGETS are 'package.module' or 'package.module:Suite' and override the
    configured suite targets.
    """
    from suiterunner.core.errors import ConfigurationError, SuiteRunnerError
    from suiterunner.core.runner import TestRunner
    from suiterunner.report.reporter import ConsoleReporter

    print_banner()

    config_path = ctx.obj.get("config_path")
    verbose = ctx.obj.get("verbose", False)

    try:
        config, base_dir = _load_config(config_path, targets)
        if not verbose:
            logging.getLogger("suiterunner").setLevel(config.output.level)
        suites = _resolve_suites(config, base_dir)
    except (FileNotFoundError, ValueError, ConfigurationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(EXIT_FATAL)

    if verbose:
        console.print(f"[dim]Loaded {len(suites)} suite(s) for project {config.project.name}[/dim]")

    reporter = ConsoleReporter(
        console=Console(no_color=not config.output.color),
        show_descriptions=config.output.show_descriptions,
        verbose=verbose,
    )
    runner = TestRunner(reporter=reporter)
    runner.register(*suites)

    try:
        summary = runner.run()
    except SuiteRunnerError as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(EXIT_FATAL)

    if report is None:
        report = config.report.enabled
    if report:
        from suiterunner.report.generator import ReportGenerator

        console.print("\n[bold]Generating report...[/bold]")
        try:
            report_path = ReportGenerator(config, base_dir).generate(summary)
            console.print(f"[green]Report generated:[/green] {report_path}")
        except OSError as e:
            console.print(f"[red]Error generating report:[/red] {e}")

    if not summary.success:
        sys.exit(EXIT_FAILED)


@main.command(name="list")
@click.argument("targets", nargs=-1)
@click.pass_context
def list_suites(ctx: click.Context, targets: tuple[str, ...]) -> None:
    """Show the classified methods of each suite."""
    from suiterunner.core.classifier import classify
    from suiterunner.core.errors import ConfigurationError
    from suiterunner.models import MethodRole

    config_path = ctx.obj.get("config_path")

    try:
        config, base_dir = _load_config(config_path, targets)
        suites = _resolve_suites(config, base_dir)
        classified = [(suite, classify(suite)) for suite in suites]
    except (FileNotFoundError, ValueError, ConfigurationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(EXIT_FATAL)

    if not classified:
        console.print("[yellow]No suites configured[/yellow]")
        return

    for suite, methods in classified:
        table = Table(title=suite.__name__)
        table.add_column("Method", style="cyan")
        table.add_column("Role")
        table.add_column("Timeout", style="dim")
        table.add_column("Description", style="dim")

        for role in MethodRole:
            for method in methods.by_role(role):
                budget = (
                    f"{method.timeout.duration} {method.timeout.unit.name}"
                    if method.timeout
                    else "-"
                )
                table.add_row(method.name, role.value, budget, method.description or "-")

        console.print(table)


if __name__ == "__main__":
    main()
