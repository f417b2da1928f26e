"""
CLI entrypoint for the vector_db in-memory vector store.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import Config
from .data_loader import load_vectors_from_file, parse_vector_tokens
from .logging_utils import configure_logging, get_logger
from .vector_store import InMemoryVectorStore


app = typer.Typer(help="In-memory vector store with nearest-neighbor search")
console = Console()
logger = get_logger(__name__)

# Let negative numbers such as -1.5 through as values instead of options.
VALUE_COMMAND_SETTINGS = {"ignore_unknown_options": True}


def _load_config(
    delimiter: Optional[str],
    on_mismatch: Optional[str],
    dimension: Optional[int],
) -> Config:
    cfg = Config()
    if delimiter:
        cfg.delimiter = delimiter
    if on_mismatch:
        cfg.on_dimension_mismatch = on_mismatch
    if dimension is not None:
        cfg.dimension = dimension

    cfg.validate()
    configure_logging(cfg.log_level)
    return cfg


def _build_store(cfg: Config, csv_files: Optional[List[Path]]) -> InMemoryVectorStore:
    store = InMemoryVectorStore(
        dimension=cfg.dimension,
        on_dimension_mismatch=cfg.on_dimension_mismatch,
    )
    for path in csv_files or []:
        count = load_vectors_from_file(
            store, path, delimiter=cfg.delimiter, encoding=cfg.encoding
        )
        console.print(f"[bold]Loaded:[/bold] {count} vectors from {escape(str(path))}")
    return store


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(1)


CSV_OPTION = typer.Option(
    None, "--csv", "-f", help="Delimited file to load before running the command (repeatable)."
)
DELIMITER_OPTION = typer.Option(
    None, "--delimiter", "-d", help="Field delimiter for delimited files (defaults to config)."
)
ON_MISMATCH_OPTION = typer.Option(
    None, "--on-mismatch", help="What a query does with vectors of another dimension (skip|raise)."
)
DIMENSION_OPTION = typer.Option(
    None, "--dimension", help="Reject vectors whose dimension differs from this value."
)


@app.command(context_settings=VALUE_COMMAND_SETTINGS)
def add(
    size: int = typer.Argument(..., help="Number of components in the vector."),
    values: List[str] = typer.Argument(..., help="Vector components."),
    csv_files: Optional[List[Path]] = CSV_OPTION,
    delimiter: Optional[str] = DELIMITER_OPTION,
    on_mismatch: Optional[str] = ON_MISMATCH_OPTION,
    dimension: Optional[int] = DIMENSION_OPTION,
) -> None:
    """
    Add one vector to the store.
    """
    try:
        cfg = _load_config(delimiter, on_mismatch, dimension)
        store = _build_store(cfg, csv_files)
        vector = parse_vector_tokens(values, dimension=size)
        index = store.insert(vector)
    except (ValueError, OSError) as exc:
        _fail(exc)

    console.print("[green]vector added.[/green]")
    console.print(f"[bold]Index:[/bold] {index}  [bold]Store size:[/bold] {len(store)}")


@app.command(context_settings=VALUE_COMMAND_SETTINGS)
def query(
    size: int = typer.Argument(..., help="Number of components in the query vector."),
    values: List[str] = typer.Argument(..., help="Query vector components."),
    csv_files: Optional[List[Path]] = CSV_OPTION,
    delimiter: Optional[str] = DELIMITER_OPTION,
    on_mismatch: Optional[str] = ON_MISMATCH_OPTION,
    dimension: Optional[int] = DIMENSION_OPTION,
) -> None:
    """
    Find the stored vector nearest to the query (Euclidean distance).
    """
    try:
        cfg = _load_config(delimiter, on_mismatch, dimension)
        store = _build_store(cfg, csv_files)
        query_vector = parse_vector_tokens(values, dimension=size)
        result = store.nearest_neighbor_with_distance(query_vector)
    except (ValueError, OSError) as exc:
        _fail(exc)

    if result is None:
        if len(store) == 0:
            console.print("[yellow]no vectors are in the database.[/yellow]")
        else:
            console.print(
                f"[yellow]no vector of dimension {query_vector.dimension} is in the database.[/yellow]"
            )
        return

    console.print(f"the nearest vector found: {escape(str(result.record.tolist()))}")
    console.print(f"[bold]Index:[/bold] {result.index}  [bold]Distance:[/bold] {result.distance:.6f}")


@app.command()
def csv(
    path: Path = typer.Argument(..., help="Delimited file with one vector per line."),
    delimiter: Optional[str] = DELIMITER_OPTION,
    dimension: Optional[int] = DIMENSION_OPTION,
) -> None:
    """
    Load vectors from a delimited file.
    """
    try:
        cfg = _load_config(delimiter, None, dimension)
        store = _build_store(cfg, [path])
    except (ValueError, OSError) as exc:
        _fail(exc)

    console.print("[green]vectors loaded from .csv file.[/green]")
    console.print(f"[bold]Store size:[/bold] {len(store)}")


@app.command()
def inspect(
    path: Path = typer.Argument(..., help="Delimited file with one vector per line."),
    delimiter: Optional[str] = DELIMITER_OPTION,
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=0, help="Number of vectors to preview (defaults to config)."
    ),
) -> None:
    """
    Load a delimited file and summarise the vectors it contains.
    """
    try:
        cfg = _load_config(delimiter, None, None)
        store = _build_store(cfg, [path])
    except (ValueError, OSError) as exc:
        _fail(exc)

    if len(store) == 0:
        console.print("[yellow]No vectors found in the file.[/yellow]")
        return

    counts = Counter(record.dimension for record in store)
    summary = Table(title="Dimensions")
    summary.add_column("Dimension", style="cyan", justify="right")
    summary.add_column("Vectors", style="green", justify="right")
    for dim in sorted(counts):
        summary.add_row(str(dim), str(counts[dim]))
    console.print(summary)

    display_count = min(limit if limit is not None else cfg.preview_rows, len(store))
    preview = Table(title=f"Vectors (showing {display_count} of {len(store)})")
    preview.add_column("#", justify="right")
    preview.add_column("Dimension", style="cyan", justify="right")
    preview.add_column("Values", style="yellow", overflow="fold")
    for i in range(display_count):
        record = store[i]
        preview.add_row(str(i), str(record.dimension), escape(str(record.tolist())))
    console.print(preview)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
