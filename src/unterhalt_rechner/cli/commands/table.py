"""Need table commands."""

from decimal import Decimal
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ...core.exceptions import UnterhaltRechnerError
from ...core.tables import get_need_table
from ...core.tables.need_table import NeedTable

app = typer.Typer(help="Need table editions")
console = Console()


def _table(edition: Optional[int]) -> NeedTable:
    try:
        return get_need_table(edition)
    except UnterhaltRechnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command("show")
def show(
    edition: Optional[int] = typer.Option(None, "--edition", "-e", help="Table edition (year)"),
):
    """Show income groups and flat amounts of a table edition."""
    need_table = _table(edition)

    table = Table(title=f"Düsseldorfer Tabelle {need_table.edition} — ab 18 Jahre")
    table.add_column("Gruppe", justify="right", style="dim")
    table.add_column("Einkommen bis (€)", justify="right")
    table.add_column("Bedarf (€)", justify="right", style="bold")
    table.add_column("Zahlbetrag (€)", justify="right")

    for group, tier in enumerate(need_table.tiers, start=1):
        table.add_row(
            str(group),
            f"{tier.ceiling:,}",
            f"{tier.need:,}",
            f"{max(tier.need - need_table.child_benefit, 0):,}",
        )
    console.print(table)

    console.print(f"  Studierende mit eigenem Haushalt:  €{need_table.student_own_household_need:,}")
    console.print(f"  Kindergeld:                        €{need_table.child_benefit:,}")
    console.print(f"  Selbstbehalt (angemessen):         €{need_table.self_support_standard:,}")
    console.print(f"  Selbstbehalt (notwendig):          €{need_table.self_support_reduced:,}")
    console.print()


@app.command("lookup")
def lookup(
    income: float = typer.Argument(..., help="Relevant monthly income (EUR)"),
    edition: Optional[int] = typer.Option(None, "--edition", "-e", help="Table edition (year)"),
):
    """Show income group and need for an income."""
    need_table = _table(edition)
    amount = Decimal(str(income))
    group = need_table.income_group(amount)
    need = need_table.need_for_combined_income(amount)

    console.print(f"\n  Einkommen:  €{amount:,.2f}")
    console.print(f"  Gruppe:     [bold]{group}[/bold] von {len(need_table.tiers)}")
    console.print(f"  Bedarf:     [bold]€{need:,}[/bold]")
    if group == len(need_table.tiers) and amount > need_table.tiers[-1].ceiling:
        console.print("  [dim]Über der höchsten Gruppe — Bedarf der obersten Gruppe.[/dim]")
    console.print()
