#!/usr/bin/env python
"""
Print a normalized Gauss-Hermite rule and optionally export or plot it.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ghnorm import InvalidArgumentError, QuadratureRuleProvider
from ghnorm.config import validate_location_scale
from ghnorm.quadrature import QuadratureRuleRecord
from ghnorm.quadrature.rule import QuadratureRule

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("scripts.show_rule")

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()


def save_record(rule: QuadratureRule, output_path: Path) -> None:
    """Save rule to json file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(QuadratureRuleRecord.from_rule(rule).model_dump_json(indent=4))


def build_table(rule: QuadratureRule, mean: float, std: float) -> Table:
    table = Table(title=f"Normalized Gauss-Hermite rule (k = {rule.order})")
    table.add_column("i", justify="right")
    table.add_column("Abscissa", justify="right")
    if mean != 0.0 or std != 1.0:
        table.add_column("mean + std * z", justify="right")
    table.add_column("Weight", justify="right")

    for i, (z, w) in enumerate(rule, start=1):
        row = [str(i), f"{z: .12f}"]
        if mean != 0.0 or std != 1.0:
            row.append(f"{mean + std * z: .12f}")
        row.append(f"{w:.6e}")
        table.add_row(*row)
    return table


@app.command()
def main(
    order: int = typer.Argument(..., help="Number of quadrature points"),
    mean: float = typer.Option(0.0, "--mean", help="Mean to shift points by"),
    std: float = typer.Option(1.0, "--std", help="Scale applied to points"),
    output_path: Path | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Write the rule as JSON to this path",
    ),
    plot_path: Path | None = typer.Option(
        None,
        "-p",
        "--plot",
        help="Save a lollipop plot of the weights to this path",
    ),
    log_scale: bool = typer.Option(
        False, "--log-scale", help="Use a log2 weight axis in the plot"
    ),
) -> None:
    """Print the abscissae and weights of a normalized Gauss-Hermite rule."""
    provider = QuadratureRuleProvider()
    try:
        validate_location_scale(mean, std)
        rule = provider.get_rule(order)
    except InvalidArgumentError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(build_table(rule, mean, std))
    console.print(f"Sum of weights: [cyan]{rule.weights.sum():.15f}[/cyan]")

    if output_path is not None:
        save_record(rule, output_path)
        logger.info(f"Wrote rule to {output_path}")

    if plot_path is not None:
        from ghnorm.plotting import plot_rule

        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig = plot_rule(rule, log_scale=log_scale)
        fig.savefig(plot_path)
        logger.info(f"Saved plot to {plot_path}")

    if output_path is not None or plot_path is not None:
        console.print(Panel("[bold green]Done[/bold green]", title="Output"))


if __name__ == "__main__":
    app()
