"""slntree CLI - Rebuild the project hierarchy of a Visual Studio solution."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from rich.markup import escape

from slntree.config import ParseConfig, ProjectNode, SolutionFolder
from slntree.errors import SlnTreeError
from slntree.output import write_output
from slntree.pipeline import parse_solution, run_pipeline


@click.group()
def cli() -> None:
    """slntree - Map the folders and projects of a .sln file."""
    pass


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _run_with_progress(config: ParseConfig):
    """Run the pipeline with Rich progress display."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        _, result = run_pipeline(config, progress_callback=on_phase)

    stats = result.stats
    timings = result.metadata.get("phase_timings", {})

    table = Table(title=f"Solution: {Path(config.solution_path).name}", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Projects", str(stats.get("projects", 0)))
    table.add_row("Folders", str(stats.get("folders", 0)))
    table.add_row("Top level", str(stats.get("top_level", 0)))
    table.add_row("Nested", str(stats.get("nesting_edges", 0)))

    types = stats.get("types", {})
    if types:
        type_str = ", ".join(f"{k}: {v}" for k, v in sorted(types.items()))
        table.add_row("Types", type_str)

    if config.check_cycles:
        table.add_row("Cycles", str(stats.get("cycles", 0)))

    duration = result.metadata.get("parse_duration_ms", 0)
    table.add_row("Duration", f"{duration:.1f}ms")

    console.print(table)

    if config.verbose and timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)

    return result


@cli.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Output JSON file path")
@click.option("--check-cycles", is_flag=True, help="Report cycles in the nesting relation")
@click.option("--verbose", is_flag=True, help="Show debug logging and phase timings")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def parse_cmd(
    path: str,
    output_path: str | None,
    check_cycles: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Parse a solution file and write its project hierarchy as JSON."""
    sln_path = Path(os.path.abspath(path))

    if output_path is None:
        output_path = f"{sln_path.stem}.slntree.json"

    config = ParseConfig(
        solution_path=str(sln_path),
        output_path=output_path,
        check_cycles=check_cycles,
        verbose=verbose,
        quiet=quiet,
    )
    _configure_logging(verbose)

    try:
        if quiet:
            _, result = run_pipeline(config)
        else:
            result = _run_with_progress(config)
    except SlnTreeError as e:
        raise click.ClickException(str(e)) from e

    write_output(result, output_path)

    if not quiet:
        from rich.console import Console
        Console().print(f"[green]Output written to:[/green] {output_path}")


def _add_branch(branch, project: ProjectNode, show_paths: bool) -> None:
    if isinstance(project, SolutionFolder):
        child = branch.add(f"[bold]{escape(project.name)}/[/bold]")
        for nested in project.projects:
            _add_branch(child, nested, show_paths)
        return

    label = f"{escape(project.name)} [dim]({project.project_type.value})[/dim]"
    if show_paths:
        label += f" [cyan]{escape(str(project.file))}[/cyan]"
    branch.add(label)


@cli.command("tree")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--paths", "show_paths", is_flag=True, help="Show project file paths")
def tree_cmd(path: str, show_paths: bool) -> None:
    """Print the folder/project tree of a solution file."""
    from rich.console import Console
    from rich.tree import Tree

    try:
        solution = parse_solution(os.path.abspath(path))
    except SlnTreeError as e:
        raise click.ClickException(str(e)) from e

    root = Tree(f"[bold blue]{escape(solution.name)}[/bold blue]")
    for project in solution.projects:
        _add_branch(root, project, show_paths)
    Console().print(root)


if __name__ == "__main__":
    cli()
