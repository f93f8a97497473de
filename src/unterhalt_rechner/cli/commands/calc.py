"""Calculation commands — evaluate a household file."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ...core.calculator import SupportCalculator
from ...core.exceptions import UnterhaltRechnerError
from ...core.income import income_breakdown
from ...core.models import HouseholdResult
from ...core.tables import get_need_table
from ...core.tables.need_table import NeedTable
from ...importers.household import Household, load_household

app = typer.Typer(help="Child-support calculation")
console = Console()


def _load(file: Path, edition: Optional[int] = None, with_table: bool = True) -> tuple[Household, Optional[NeedTable]]:
    """Load household and table; --edition wins over the file's table_edition."""
    try:
        household = load_household(file)
        if not with_table:
            return household, None
        table = get_need_table(edition if edition is not None else household.table_edition)
    except UnterhaltRechnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return household, table


def _eur(amount: Decimal) -> str:
    return f"€{amount:,.2f}"


def result_to_dict(result: HouseholdResult) -> dict:
    """Plain-data form of a household result (amounts as decimal strings)."""
    return {
        "incomes": {
            "father": str(result.incomes.father),
            "mother": str(result.incomes.mother),
        },
        "per_child": [
            {
                "name": r.child.name,
                "need": {
                    "table_need": str(r.need.table_need),
                    "child_benefit": str(r.need.child_benefit),
                    "net_after_benefit": str(r.need.net_after_benefit),
                    "own_contribution": str(r.need.own_contribution),
                    "net_after_own_income": str(r.need.net_after_own_income),
                },
                "split": {
                    "father_pays": str(r.split.father_pays),
                    "mother_pays": str(r.split.mother_pays),
                },
                "reduced_self_support": r.reduced_self_support,
                "shortfall": str(r.shortfall),
            }
            for r in result.children
        ],
    }


@app.command("run")
def run(
    file: Path = typer.Argument(..., help="Household JSON file"),
    edition: Optional[int] = typer.Option(None, "--edition", "-e", help="Table edition (year)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Calculate need and payment split for every child in a household."""
    household, need_table = _load(file, edition)
    result = SupportCalculator(need_table).calculate(
        household.father, household.mother, household.children
    )

    if as_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
        return

    console.print(f"\n[bold]Düsseldorfer Tabelle {need_table.edition}[/bold]\n")
    console.print(f"  Relevantes Einkommen Vater:   {_eur(result.incomes.father)}")
    console.print(f"  Relevantes Einkommen Mutter:  {_eur(result.incomes.mother)}")
    console.print(
        f"  Zusammen:                     {_eur(result.incomes.combined)}"
        f"  [dim](Gruppe {need_table.income_group(result.incomes.combined)})[/dim]\n"
    )

    if not result.children:
        console.print("[yellow]No children in household file.[/yellow]")
        return

    table = Table(title="Unterhalt je Kind")
    table.add_column("Kind", style="bold")
    table.add_column("Bedarf (€)", justify="right")
    table.add_column("Kindergeld (€)", justify="right")
    table.add_column("Eigenes Eink. (€)", justify="right")
    table.add_column("Restbedarf (€)", justify="right")
    table.add_column("SB", justify="center")
    table.add_column("Vater (€)", justify="right")
    table.add_column("Mutter (€)", justify="right")
    table.add_column("Ungedeckt (€)", justify="right")

    for r in result.children:
        sb = "notw." if r.reduced_self_support else "angem."
        shortfall = f"[yellow]{r.shortfall:,.2f}[/yellow]" if r.shortfall > 0 else "—"
        table.add_row(
            r.child.name,
            f"{r.need.table_need:,.2f}",
            f"−{r.need.child_benefit:,.2f}",
            f"−{r.need.own_contribution:,.2f}",
            f"{r.need.net_after_own_income:,.2f}",
            sb,
            f"{r.split.father_pays:,.2f}",
            f"{r.split.mother_pays:,.2f}",
            shortfall,
        )

    table.add_row(
        "[bold]Summe[/bold]", "", "", "", "", "",
        f"[bold]{result.father_total:,.2f}[/bold]",
        f"[bold]{result.mother_total:,.2f}[/bold]",
        "",
    )
    console.print(table)

    if any(r.shortfall > 0 for r in result.children):
        console.print(
            "\n  [yellow]⚠ Haftungsgrenze erreicht — der ungedeckte Bedarf wird nicht "
            "auf den anderen Elternteil umgelegt.[/yellow]"
        )
    console.print()


@app.command("income")
def income(file: Path = typer.Argument(..., help="Household JSON file")):
    """Show how each parent's relevant income is derived."""
    household, _ = _load(file, with_table=False)

    table = Table(title="Relevantes Einkommen")
    table.add_column("Position")
    table.add_column("Vater (€)", justify="right")
    table.add_column("Mutter (€)", justify="right")

    father = income_breakdown(household.father)
    mother = income_breakdown(household.mother)
    # 0 - x, not -x: Decimal negation of 0 prints as -0.00
    rows = [
        ("Netto vor berufsbed. Aufwand", father.net_before_job_costs, mother.net_before_job_costs, ""),
        ("Berufsbedingte Aufwendungen", 0 - father.job_costs, 0 - mother.job_costs, ""),
        ("Immobilien (Miete / Wohnvorteil)", father.property_delta, mother.property_delta, ""),
        ("Steuererstattung & sonstiges", father.refunds_and_other, mother.refunds_and_other, ""),
        ("Zusätzliche Altersvorsorge", 0 - father.pension_deduction, 0 - mother.pension_deduction, ""),
        ("Relevantes Einkommen", father.relevant_income, mother.relevant_income, "bold"),
    ]
    for label, f, m, style in rows:
        if style:
            table.add_row(f"[{style}]{label}[/{style}]", f"[{style}]{f:+,.2f}[/{style}]", f"[{style}]{m:+,.2f}[/{style}]")
        else:
            table.add_row(label, f"{f:+,.2f}", f"{m:+,.2f}")

    console.print(table)
    console.print()
