"""Typer CLI for vcf-ingest.

Usage:
    # Three samples, UCSC chromosome names (default)
    vcf-ingest colon1.vcf intestine1.vcf liver1.vcf.gz \\
        -s colon1 -s intestine1 -s liver1 --genome hg19

    # NCBI naming, four workers
    vcf-ingest a.vcf b.vcf -s a -s b --style NCBI -j 4
"""

import traceback
import warnings
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from vcf_ingest import __version__

app = typer.Typer(
    name="vcf-ingest",
    help="Load per-sample VCF files, normalize chromosome names and keep biallelic SNVs",
    add_completion=False,
)

console = Console()


class Style(str, Enum):
    """Chromosome naming style."""

    UCSC = "UCSC"
    NCBI = "NCBI"
    Ensembl = "Ensembl"


def summary_table(batch, files: list[Path], discarded: dict[Path, int]) -> Table:
    """Build a per-sample summary table."""
    table = Table(title="Loaded samples")
    table.add_column("Sample", style="bold")
    table.add_column("File")
    table.add_column("SNVs kept", justify="right")
    table.add_column("Removed", justify="right")
    table.add_column("Chromosomes", justify="right")

    for (name, collection), path in zip(batch.items(), files):
        table.add_row(
            name,
            path.name,
            f"{len(collection):,}",
            f"{discarded.get(path, 0):,}",
            str(len(collection.seqnames())),
        )
    return table


@app.command()
def load(
    vcf_files: Annotated[
        list[Path],
        typer.Argument(
            help="VCF files (plain or gzipped), one per sample",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    samples: Annotated[
        list[str],
        typer.Option(
            "--sample", "-s",
            help="Sample name; repeat once per VCF file, in the same order",
        ),
    ],
    genome: Annotated[
        str,
        typer.Option(
            "--genome", "-g",
            help="Genome build label (e.g. hg19)",
        ),
    ] = "-",
    style: Annotated[
        Style,
        typer.Option(
            "--style",
            help="Chromosome naming style",
        ),
    ] = Style.UCSC,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers", "-j",
            help="Number of parallel workers (default: CPU count - 1)",
            min=1,
        ),
    ] = None,
    threads: Annotated[
        bool,
        typer.Option(
            "--threads",
            help="Use a thread pool instead of worker processes",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Enable verbose logging",
        ),
    ] = False,
) -> None:
    """Load VCF files into per-sample SNV collections and print a summary."""
    from vcf_ingest.batch import ingest
    from vcf_ingest.config import IngestConfig
    from vcf_ingest.errors import DiscardedRecordsWarning, VcfIngestError
    from vcf_ingest.logging_config import setup_logging

    setup_logging(verbose=verbose)

    console.print(f"[bold]vcf-ingest[/bold] v{__version__}\n", style="blue")

    config = IngestConfig(
        vcf_files=vcf_files,
        sample_names=samples,
        genome=genome,
        style=style.value,
        max_workers=workers,
        executor="thread" if threads else "process",
    )

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {error}")
        raise typer.Exit(code=1)

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DiscardedRecordsWarning)
            batch = ingest(
                config.vcf_files,
                config.sample_names,
                genome=config.genome,
                style=config.style,
                max_workers=config.max_workers,
                executor=config.executor,
            )
    except VcfIngestError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        if verbose:
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)

    # Warnings arrive in input order, one per file with removed records
    discarded: dict[Path, int] = {}
    for w in caught:
        if issubclass(w.category, DiscardedRecordsWarning):
            console.print(f"[yellow]Warning:[/yellow] {w.message}")
            discarded[w.message.path] = w.message.count

    console.print(summary_table(batch, config.vcf_files, discarded))
    console.print(
        f"\n[green]Loaded {batch.total_records:,} SNVs for {len(batch)} sample(s).[/green]"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
