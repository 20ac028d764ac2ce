"""CLI entry point for csgraph."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from csgraph.core.database import load_database, read_database
from csgraph.core.database.loader import DEFAULT_DB_NAME
from csgraph.core.exceptions import FormatError
from csgraph.core.graph import CallGraph, build_call_graph
from csgraph.core.graph.query import DEFAULT_DEPTH, render_query
from csgraph.core.models import CscopeDatabase
from csgraph.logging import configure_logging

app = typer.Typer(
    name="csgraph",
    help="Caller/callee graphs from a cscope database.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

DatabaseArg = Annotated[
    Path,
    typer.Argument(help="cscope.out database file", envvar="CSGRAPH_DATABASE"),
]
DepthOpt = Annotated[int, typer.Option("--depth", "-d", min=0, help="Depth of traversal")]
OutputOpt = Annotated[
    Path | None, typer.Option("--output", "-o", help="Write results to this file")
]
PruneOpt = Annotated[
    bool,
    typer.Option("--prune-cycles", help="Do not expand a function already on the current path"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Caller/callee graphs from a cscope database."""
    configure_logging("DEBUG" if verbose else None)


def load(database: Path) -> CscopeDatabase:
    """Read and decode a database, exiting with status 1 on failure."""
    try:
        return load_database(read_database(database))
    except FileNotFoundError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e
    except FormatError as e:
        err_console.print(f"[red]Error loading cscope database {database}: {e}[/red]")
        raise typer.Exit(1) from e


def load_graph(database: Path) -> CallGraph:
    """Load a database and build its call graph behind a spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Loading [cyan]{database.name}[/]", total=None)
        db = load(database)

        def on_progress(count: int) -> None:
            progress.update(task, description=f"Building internal database ({count} functions)")

        return build_call_graph(db.files, on_progress=on_progress)


def write_result(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")


@app.command()
def graph(
    function: Annotated[
        str, typer.Option("--function", "-f", help="Function to plot callers and callees of")
    ],
    database: DatabaseArg = Path(DEFAULT_DB_NAME),
    depth: DepthOpt = DEFAULT_DEPTH,
    output: OutputOpt = None,
    no_callers: Annotated[
        bool, typer.Option("--no-callers", "-x", help="Do not print callers of the function")
    ] = False,
    no_callees: Annotated[
        bool, typer.Option("--no-callees", "-y", help="Do not print callees of the function")
    ] = False,
    prune_cycles: PruneOpt = False,
) -> None:
    """Print callers then callees of a function as Graphviz digraphs."""
    call_graph = load_graph(database)
    text = render_query(
        call_graph,
        function,
        depth,
        callers=not no_callers,
        callees=not no_callees,
        prune_cycles=prune_cycles,
    )
    write_result(text, output)


@app.command()
def callers(
    name: Annotated[str, typer.Argument(help="Function name")],
    database: DatabaseArg = Path(DEFAULT_DB_NAME),
    depth: DepthOpt = DEFAULT_DEPTH,
    output: OutputOpt = None,
    prune_cycles: PruneOpt = False,
) -> None:
    """Show what calls a function (who calls this?)."""
    call_graph = load_graph(database)
    text = render_query(call_graph, name, depth, callees=False, prune_cycles=prune_cycles)
    write_result(text, output)


@app.command()
def callees(
    name: Annotated[str, typer.Argument(help="Function name")],
    database: DatabaseArg = Path(DEFAULT_DB_NAME),
    depth: DepthOpt = DEFAULT_DEPTH,
    output: OutputOpt = None,
    prune_cycles: PruneOpt = False,
) -> None:
    """Show what a function calls (what does this call?)."""
    call_graph = load_graph(database)
    text = render_query(call_graph, name, depth, callers=False, prune_cycles=prune_cycles)
    write_result(text, output)


@app.command()
def info(
    database: DatabaseArg = Path(DEFAULT_DB_NAME),
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show database header, trailer and decode statistics."""
    db = load(database)
    header, trailer, stats = db.header, db.trailer, db.stats

    if output_json:
        result = {
            "version": header.version,
            "directory": header.directory,
            "compression": header.compression,
            "inverted_index": header.inverted_index,
            "prefix_match": header.prefix_match,
            "trailer_offset": header.trailer_offset,
            "viewpaths": trailer.n_viewpaths,
            "sources": trailer.n_sources,
            "includes": trailer.n_includes,
            **stats.as_dict(),
        }
        print(json.dumps(result))
        return

    flags = [
        flag
        for flag, enabled in (
            ("compressed", header.compression),
            ("inverted index", header.inverted_index),
            ("prefix match", header.prefix_match),
        )
        if enabled
    ]
    console.print(f"[bold cyan]{database}[/] (version {header.version})")
    console.print(f"  Directory: {header.directory}")
    console.print(f"  Flags: {', '.join(flags) if flags else 'none'}")
    console.print(
        f"  Trailer: {trailer.n_viewpaths} viewpaths, "
        f"{trailer.n_sources} sources, {trailer.n_includes} includes"
    )
    console.print(f"  Files: {stats.files}")
    console.print(f"  Functions: {stats.functions}")
    console.print(f"  Call sites: {stats.call_sites}")
    if stats.discarded_files:
        console.print(f"  [dim]Discarded file records: {stats.discarded_files}[/]")
    if stats.duplicate_functions:
        console.print(f"  [dim]Ignored redefinitions: {stats.duplicate_functions}[/]")
    if stats.orphan_calls:
        console.print(f"  [dim]Calls outside functions: {stats.orphan_calls}[/]")
    if stats.truncated_records:
        console.print(f"  [red]Truncated records: {stats.truncated_records}[/red]")


if __name__ == "__main__":
    app()
