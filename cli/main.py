"""CLI entry point — Typer app for bidwin commands.

Usage (from the repository root, with the package installed):
    python cli/main.py generate "What encryption do you use?"
    python cli/main.py audit "Our system is 100% unhackable."
    python cli/main.py audit --file draft.txt
    python cli/main.py vault policy.txt
    python cli/main.py vault --sample
    python cli/main.py status
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="bidwin",
    help="BidWin Knowledge & Governance — generate, audit, manage the vault.",
    no_args_is_help=True,
)

console = Console()

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to settings.yaml")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _platform(config: Path | None):
    from bidwin.app import build_platform
    from bidwin.config import load_settings

    return build_platform(load_settings(config))


@app.command()
def generate(
    question: str = typer.Argument(..., help="Client question to answer"),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Generate a sourced answer from the Knowledge Vault."""
    platform = _platform(config)
    generator = platform.generator

    async def _run() -> bool:
        try:
            return await generator.submit(question)
        finally:
            await platform.aclose()

    if not asyncio.run(_run()):
        console.print("[yellow]Enter a question to generate an answer.[/]")
        raise typer.Exit(code=1)

    result = generator.result
    if generator.show_warning_banner:
        console.print(Panel(
            escape(result.warning), title="INFORMATION MISSING", border_style="yellow",
        ))

    if result.answer:
        console.print(f"\n[bold green]A:[/] {escape(result.answer)}")

    if result.citations:
        console.print("\n[bold]Citations from Knowledge Vault[/]")
        for citation in result.citations:
            console.print(f"  [italic]“{escape(citation.source_text)}”[/]")
            if citation.relevance:
                console.print(f"    [dim]Relevance: {escape(citation.relevance)}[/]")


@app.command()
def audit(
    draft: str | None = typer.Argument(None, help="Draft text to audit"),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Read the draft from a file",
    ),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Audit draft content for compliance risks."""
    from bidwin.taxonomy import (
        BADGE_STYLES,
        BAND_STYLES,
        ICON_GLYPHS,
        format_score,
    )

    text = file.read_text(encoding="utf-8") if file else (draft or "")
    platform = _platform(config)
    auditor = platform.auditor

    async def _run() -> bool:
        try:
            return await auditor.submit(text)
        finally:
            await platform.aclose()

    if not asyncio.run(_run()):
        console.print("[yellow]Paste draft content to audit.[/]")
        raise typer.Exit(code=1)

    result = auditor.result
    if result is None:
        # Failure reason is already logged by the controller.
        raise typer.Exit(code=1)

    band = auditor.score_band
    console.print(Panel(
        f"{format_score(result.compliance_score)} Compliance Score\n"
        f"{result.total_sentences} sentences analyzed",
        style=BAND_STYLES[band],
        title=band.value.upper(),
    ))

    table = Table(title="Detailed Analysis")
    table.add_column("", width=2)
    table.add_column("Sentence")
    table.add_column("Status", no_wrap=True)
    table.add_column("Analysis")
    table.add_column("Reference", style="dim")

    for row in auditor.sentence_rows():
        item = row.analysis
        table.add_row(
            ICON_GLYPHS[row.icon] if row.icon else "",
            escape(item.sentence),
            f"[{BADGE_STYLES[row.badge]}]{escape(item.status)}[/]",
            escape(item.explanation),
            escape(item.vault_reference),
        )

    console.print(table)
    console.print(f"\n[bold]Summary:[/] {escape(result.summary)}")


@app.command()
def vault(
    path: Path | None = typer.Argument(None, help="File with vault content"),
    sample: bool = typer.Option(False, "--sample", help="Use the sample document"),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Save and index Knowledge Vault content."""
    from bidwin.vault.schemas import SaveState

    platform = _platform(config)
    manager = platform.vault

    if sample:
        manager.load_sample()
    elif path is not None:
        manager.set_content(path.read_text(encoding="utf-8"))

    async def _run():
        try:
            return await manager.save()
        finally:
            await platform.aclose()

    outcome = asyncio.run(_run())
    if outcome.state is SaveState.SAVED:
        console.print(f"[bold green]{outcome.message}[/]")
    else:
        console.print(f"[yellow]{escape(outcome.message)}[/]")
        raise typer.Exit(code=1)


@app.command()
def status(config: Path | None = _CONFIG_OPTION) -> None:
    """Show configured agents and available transports."""
    from bidwin import __version__
    from bidwin.agents.factory import available_transports
    from bidwin.config import load_settings

    settings = load_settings(config)

    console.print(f"\n[bold green]bidwin[/] v{__version__}\n")

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Transport", settings.agent.transport)
    table.add_row("Available Transports", ", ".join(available_transports()))
    table.add_row("Agent Base URL", settings.agent.base_url)
    table.add_row("Generator Agent", settings.agent.generator_id)
    table.add_row("Auditor Agent", settings.agent.auditor_id)
    table.add_row("Vault Index", settings.agent.vault_rag_id)

    console.print(table)


if __name__ == "__main__":
    app()
