"""Command-line interface for renumbering edgelists and deriving motif hypergraphs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from hyperbuild.config import Settings
from hyperbuild.engine.motifs import STRATEGIES, MotifHypergraphBuilder
from hyperbuild.engine.persistence import (
    load_edgelist,
    load_hypergraph,
    save_hypergraph,
)
from hyperbuild.engine.remap import build_correction, remap_edges

logger = logging.getLogger("hyperbuild.cli")


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(str(exc))


@click.group()
@click.option("--log-level", default=None, help="Logging level (overrides HYPERBUILD_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Assemble graphs and hypergraphs from edgelists."""
    try:
        settings = Settings.from_env()
        if log_level:
            settings = Settings.model_validate({**settings.model_dump(), "log_level": log_level})
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc
    # All logging goes to stderr; stdout carries command output
    logging.basicConfig(
        stream=sys.stderr, level=settings.log_level, format="%(levelname)s: %(message)s"
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("edgelist", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--size", "universe_size", required=True, type=int, help="Vertex count N.")
@click.option("--exclude", multiple=True, type=int, help="1-based vertex index to drop.")
def remap(edgelist: str, output: str, universe_size: int, exclude: tuple[int, ...]) -> None:
    """Drop excluded vertices from EDGELIST and renumber the rest into OUTPUT."""
    logger.info("Remapping %s: N=%d, excluded=%s", edgelist, universe_size, list(exclude))
    try:
        correction = build_correction(universe_size, exclude)
        edges = remap_edges(load_edgelist(edgelist), correction, exclude)
    except ValueError as exc:
        raise _fail(exc) from exc
    Path(output).parent.mkdir(parents=True, exist_ok=True)
    Path(output).write_text("".join(" ".join(map(str, e)) + "\n" for e in edges))
    click.echo(f"Wrote {len(edges)} edges over {len(correction)} vertices to {output}")


@cli.command()
@click.argument("edgelist", type=click.Path(exists=True, dir_okay=False))
@click.argument("prefix", type=click.Path(dir_okay=False))
@click.option("--bound", default=None, type=int, help="Declared vertex range [1, M].")
@click.option("--workers", default=None, type=int, help="Threads for the prey loop.")
@click.option("--strategy", default=None, type=click.Choice(STRATEGIES), help="Enumeration.")
@click.pass_context
def motifs(
    ctx: click.Context,
    edgelist: str,
    prefix: str,
    bound: int | None,
    workers: int | None,
    strategy: str | None,
) -> None:
    """Write the two-prey/two-predator motif hypergraph of EDGELIST to PREFIX."""
    settings: Settings = ctx.obj["settings"]
    try:
        builder = MotifHypergraphBuilder(load_edgelist(edgelist), bound=bound)
        hypergraph = builder.to_hypergraph(
            workers=workers or settings.workers,
            strategy=strategy or settings.motif_strategy,  # type: ignore[arg-type]
        )
    except ValueError as exc:
        raise _fail(exc) from exc
    save_hypergraph(hypergraph, prefix)
    click.echo(f"Motifs: {hypergraph.num_edges} over {builder.bound} vertices")


@cli.command()
@click.argument("prefix", type=click.Path(dir_okay=False))
def stats(prefix: str) -> None:
    """Show counts for the hypergraph stored at PREFIX."""
    try:
        s = load_hypergraph(prefix).stats()
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc
    click.echo(f"Vertices: {s.vertex_count}  Edges: {s.edge_count}")
    if s.edges_by_size:
        click.echo("Edges by size:")
        for size, count in s.edges_by_size.items():
            click.echo(f"  {size}: {count}")
    if s.cluster_sizes:
        click.echo("Vertices by cluster:")
        for name, count in s.cluster_sizes.items():
            click.echo(f"  {name}: {count}")
        if s.unclustered:
            click.echo(f"  (none): {s.unclustered}")


@cli.command()
@click.argument("prefix", type=click.Path(dir_okay=False))
@click.pass_context
def validate(ctx: click.Context, prefix: str) -> None:
    """Check the hypergraph stored at PREFIX for consistency."""
    try:
        result = load_hypergraph(prefix).validate()
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc
    if result.valid:
        click.echo("Hypergraph is valid.")
    else:
        click.echo("Validation errors:")
        for err in result.errors:
            click.echo(f"  ERROR: {err}")
    for warn in result.warnings:
        click.echo(f"  WARNING: {warn}")
    if not result.valid:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
