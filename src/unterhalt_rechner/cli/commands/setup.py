"""Interactive setup wizard — ur setup."""

from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ...core.config import AppConfig, get_config, save_config
from ...core.exceptions import UnterhaltRechnerError
from ...core.tables import NEED_TABLES
from ...core.tables.need_table import load_need_table

app = typer.Typer(help="Interactive setup wizard")
console = Console()


def _say(text: str, style: str = ""):
    """Bot 'speaks'."""
    console.print(f"\n  {text}" if not style else f"\n  [{style}]{text}[/{style}]")


def _pick(choices: list[str], default: int = 0) -> int:
    """Pick from numbered list. Returns 0-based index."""
    while True:
        raw = Prompt.ask("  [cyan]>[/cyan]", default=str(default + 1), console=console)
        try:
            idx = int(raw) - 1
            if 0 <= idx < len(choices):
                return idx
        except ValueError:
            pass
        console.print("    [red]Enter a number from the list[/red]")


def _yesno(prompt: str, default: bool = True) -> bool:
    console.print(f"\n  {prompt}")
    return Confirm.ask("  [cyan]>[/cyan]", default=default, console=console)


def _rate(prompt: str, current: Decimal) -> Decimal:
    """Ask for a percentage, returned as a fraction (5 → 0.05)."""
    while True:
        raw = Prompt.ask(f"  [cyan]>[/cyan] {prompt} %", default=f"{(current * 100).normalize():f}", console=console)
        try:
            pct = Decimal(raw.replace(",", "."))
        except InvalidOperation:
            console.print("    [red]Enter a number, e.g. 5[/red]")
            continue
        if 0 <= pct <= 100:
            return pct / 100
        console.print("    [red]Enter a value between 0 and 100[/red]")


@app.command("run")
def run_setup():
    """Run the interactive setup wizard."""
    existing = get_config()

    console.print()
    console.print(Panel.fit(
        "[bold]Unterhalt-Rechner — Setup[/bold]",
        border_style="cyan",
        padding=(0, 4),
    ))
    _say("Answer a few questions. Current settings are shown as defaults.")

    # ── Name (optional) ───────────────────────────────────────────────────────
    console.print("\n  Your name? (optional)")
    name = Prompt.ask("  [cyan]>[/cyan]", default=existing.user_name or "", console=console)

    # ── Table edition ─────────────────────────────────────────────────────────
    _say("Which edition of the Düsseldorfer Tabelle should be used?")
    editions = sorted(NEED_TABLES)
    choices = [f"Düsseldorfer Tabelle {year}" for year in editions] + ["Custom table (JSON file)"]
    for i, c in enumerate(choices, 1):
        console.print(f"    [bold]{i}.[/bold] {c}")
    current_idx = (
        len(choices) - 1 if existing.table_file
        else editions.index(existing.table_edition) if existing.table_edition in editions
        else len(editions) - 1
    )
    idx = _pick(choices, default=current_idx)

    table_edition = existing.table_edition
    table_file = ""
    if idx < len(editions):
        table_edition = editions[idx]
        _say(f"Edition: [bold]{table_edition}[/bold]", "green")
    else:
        while True:
            raw = Prompt.ask("  [cyan]>[/cyan] Path to table JSON", default=existing.table_file, console=console)
            try:
                custom = load_need_table(raw)
            except UnterhaltRechnerError as e:
                console.print(f"    [red]{e}[/red]")
                continue
            table_file = str(Path(raw).resolve())
            table_edition = custom.edition
            _say(f"Custom table, edition [bold]{custom.edition}[/bold] ({len(custom.tiers)} groups).", "green")
            break

    # ── Default rates ─────────────────────────────────────────────────────────
    _say("Default job-related expense rate (berufsbedingte Aufwendungen, usually 5%):")
    _say("[dim]Used when a household file gives no job_expense_rate.[/dim]")
    job_rate = _rate("Rate", existing.job_expense_rate)

    _say("Cap for voluntary additional pension, as share of gross (usually 4%):")
    pension_cap = _rate("Cap", existing.additional_pension_cap_rate)

    # ── Summary & confirm ─────────────────────────────────────────────────────
    console.print()
    table = Table(box=box.ROUNDED, border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(style="bold")
    if name:
        table.add_row("Name", name)
    table.add_row("Table edition", str(table_edition))
    if table_file:
        table.add_row("Table file", table_file)
    table.add_row("Job expense rate", f"{(job_rate * 100).normalize():f}%")
    table.add_row("Pension cap rate", f"{(pension_cap * 100).normalize():f}%")
    console.print(table)

    _say("Save these settings?")
    if not _yesno("", default=True):
        _say("Cancelled. Settings unchanged.", "yellow")
        raise typer.Exit()

    cfg = AppConfig(
        table_edition=table_edition,
        table_file=table_file,
        job_expense_rate=job_rate,
        additional_pension_cap_rate=pension_cap,
        currency=existing.currency,
        user_name=name,
    )
    save_config(cfg)

    console.print()
    console.print(Panel.fit(
        "[bold green]✓ Settings saved to config.json[/bold green]\n\n"
        "[dim]Run [bold]ur setup run[/bold] again to change.[/dim]",
        border_style="green",
        padding=(0, 2),
    ))
    console.print()
