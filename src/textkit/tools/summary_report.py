"""Per-document summary of a tokenize run, rendered with rich."""

from __future__ import annotations
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from ..pipeline.context import TokenizedBatch


def summarize(batch: TokenizedBatch) -> Dict[str, Any]:
    counts = [len(t) for t in batch.documents if t is not None]
    return {
        "documents": len(batch),
        "failed": len(batch.failures),
        "tokens": sum(counts),
        "empty": sum(1 for c in counts if c == 0),
        "granularity": batch.granularity,
        "ngrams": list(batch.ngrams),
        "concatenator": batch.concatenator,
    }


def render_summary(batch: TokenizedBatch, console: Optional[Console] = None, max_rows: int = 50) -> None:
    console = console or Console()
    stats = summarize(batch)

    table = Table(
        title=f"{stats['documents']:,} documents, {stats['tokens']:,} tokens ({stats['granularity']})",
        box=box.SIMPLE,
    )
    table.add_column("Document", style="cyan")
    table.add_column("Tokens", justify="right")
    table.add_column("Status")

    for i, (name, toks) in enumerate(zip(batch.names, batch.documents)):
        if i >= max_rows:
            table.add_row("...", "", f"{len(batch) - max_rows} more")
            break
        if toks is None:
            table.add_row(name, "-", "[red]failed[/red]")
        else:
            table.add_row(name, f"{len(toks):,}", "[green]ok[/green]" if toks else "[yellow]empty[/yellow]")
    console.print(table)

    for f in batch.failures:
        console.print(f"[red]x[/red] {f.name}: {f.reason}")
