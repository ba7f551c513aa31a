"""
Command-Line Interface for LumpSum.

Purpose
-------
Runs the invest-vs-pay-down comparison, manages input files and renders
reports from saved results without writing Python code.

Commands
--------
- compare: Project both strategies and show the verdict
- config: Create, validate and display input files
- report: Render summaries, yearly tables or CSV from saved results
- info: Show versions of the installed stack

Example Usage
-------------
    # Compare with the calculator defaults
    $ lumpsum compare

    # Compare custom inputs, save results and a chart
    $ lumpsum compare --mortgage-rate 6.5 --lump-sum 80000 -o results/run.json --plot results/run.png

    # Inputs from a file
    $ lumpsum config create inputs.json
    $ lumpsum compare --inputs inputs.json --format json

    # Yearly table from saved results
    $ lumpsum report -r results/run.json --format yearly
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import click

from .constants import DEFAULT_INPUTS, INVEST_LABEL, PAY_DOWN_LABEL
from .exceptions import LumpSumError
from .inputs import FIELD_LABELS, FIELD_NAMES, accepts_entry, coerce_field

logger = logging.getLogger(__name__)


# Lazy imports for performance
def _import_rich():
    """Lazy import Rich for better startup time."""
    try:
        from rich.console import Console
        from rich.table import Table
        from rich.panel import Panel
        return Console(), Table, Panel
    except ImportError:
        return None, None, None


def _get_console():
    """Get Rich console or fallback to basic printing."""
    console, *_ = _import_rich()
    return console


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Version
__version__ = "0.1.0"


@click.group()
@click.version_option(version=__version__, prog_name="lumpsum")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    LumpSum - Pay down the mortgage or invest the lump sum?

    Compares investing a lump sum while keeping the mortgage against
    prepaying principal and investing the monthly savings.

    Use 'lumpsum COMMAND --help' for command-specific help.
    """
    from .config import AppSettings

    settings = AppSettings()
    _configure_logging(settings.effective_log_level)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = _get_console()


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

def _numeric_entry(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Reject anything that is not a non-negative decimal number."""
    if value is not None and not accepts_entry(value):
        raise click.BadParameter(
            f"'{value}' is not a non-negative decimal number (digits and at most one '.')"
        )
    return value


def _input_option(name: str):
    flag = "--" + name.replace("_", "-")
    return click.option(
        flag,
        name,
        type=str,
        default=None,
        callback=_numeric_entry,
        help=f"{FIELD_LABELS[name]} (default: {DEFAULT_INPUTS[name]:g})",
    )


def _resolve_inputs(inputs_file: Optional[Path], entries: Dict[str, Optional[str]]):
    """Start from the defaults or an inputs file, then apply explicit options.

    The result is range-checked through MortgageInputsConfig.
    """
    from .config import MortgageInputsConfig
    from .engine import MortgageInputs
    from .serialization import load_inputs

    if inputs_file is not None:
        base = load_inputs(inputs_file)
        values = {name: getattr(base, name) for name in FIELD_NAMES}
    else:
        values = dict(DEFAULT_INPUTS)
    for name, entry in entries.items():
        if entry is not None:
            values[name] = coerce_field(entry)
    return MortgageInputsConfig.from_inputs(MortgageInputs(**values)).to_inputs()


@main.command()
@_input_option("remaining_balance")
@_input_option("lump_sum")
@_input_option("remaining_years")
@_input_option("mortgage_rate")
@_input_option("market_return")
@click.option(
    "--inputs", "-i", "inputs_file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to inputs file (JSON); explicit options override its values"
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save results to this JSON file"
)
@click.option(
    "--plot",
    type=click.Path(path_type=Path),
    default=None,
    help="Save a comparison chart to this image file"
)
@click.option("--no-series", is_flag=True, help="Skip the month-by-month time series")
@click.pass_context
def compare(
    ctx: click.Context,
    remaining_balance: Optional[str],
    lump_sum: Optional[str],
    remaining_years: Optional[str],
    mortgage_rate: Optional[str],
    market_return: Optional[str],
    inputs_file: Optional[Path],
    output_format: str,
    output: Optional[Path],
    plot: Optional[Path],
    no_series: bool,
) -> None:
    """
    Compare investing the lump sum against paying down the mortgage.

    Example:
        lumpsum compare --remaining-balance 300000 --lump-sum 50000 --mortgage-rate 3.5
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)
    display = ctx.obj["settings"].display()

    # Import here to avoid slow startup
    from .engine import project
    from .serialization import results_to_dict, save_results

    entries = {
        "remaining_balance": remaining_balance,
        "lump_sum": lump_sum,
        "remaining_years": remaining_years,
        "mortgage_rate": mortgage_rate,
        "market_return": market_return,
    }
    try:
        inputs = _resolve_inputs(inputs_file, entries)
    except (LumpSumError, ValueError, OSError) as e:
        click.echo(f"Error loading inputs: {e}", err=True)
        sys.exit(1)

    logger.info("Comparing strategies for %s", inputs)
    results = project(inputs, include_series=not no_series)

    if output_format == "json":
        click.echo(json.dumps(results_to_dict(results, include_series=not no_series), indent=2))
    else:
        _print_summary(results, console, quiet, display)

    if output:
        save_results(results, output, include_series=not no_series)
        if not quiet:
            click.echo(f"Results saved to {output}")

    if plot:
        if not _save_plot(results, plot):
            sys.exit(1)
        if not quiet:
            click.echo(f"Chart saved to {plot}")


def _print_summary(results, console, quiet: bool, display) -> None:
    """Scenario table plus verdict, via Rich when available."""
    from .comparison import verdict
    from .utils import format_currency

    def fmt(value: float) -> str:
        return format_currency(value, decimals=display.decimals, symbol=display.currency_symbol)

    invest = results.invest_lump_sum
    pay_down = results.pay_down_mortgage
    text = verdict(results, symbol=display.currency_symbol, decimals=display.decimals)

    if console and not quiet:
        from rich.table import Table
        from rich.panel import Panel

        table = Table(title="Strategy Comparison", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column(INVEST_LABEL, style="green", justify="right")
        table.add_column(PAY_DOWN_LABEL, style="blue", justify="right")

        table.add_row("Final Portfolio Value", fmt(invest.final_portfolio_value),
                      fmt(pay_down.final_portfolio_value))
        table.add_row("Total Interest Paid", fmt(invest.total_interest_paid),
                      fmt(pay_down.total_interest_paid))
        table.add_row("Monthly Mortgage", fmt(invest.monthly_payment),
                      fmt(pay_down.monthly_payment))
        table.add_row("Monthly Investment", fmt(0.0), fmt(results.monthly_investment))

        console.print(table)
        console.print(Panel(text, title="The Verdict", border_style="green"))
    else:
        click.echo(f"{INVEST_LABEL}: final value {fmt(invest.final_portfolio_value)}, "
                   f"interest {fmt(invest.total_interest_paid)}, "
                   f"monthly payment {fmt(invest.monthly_payment)}")
        click.echo(f"{PAY_DOWN_LABEL}: final value {fmt(pay_down.final_portfolio_value)}, "
                   f"interest {fmt(pay_down.total_interest_paid)}, "
                   f"monthly payment {fmt(pay_down.monthly_payment)}")
        click.echo(text)


def _save_plot(results, path: Path) -> bool:
    """Render the comparison chart off-screen; False if matplotlib is unusable."""
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        click.echo("Error: matplotlib not installed. Install with: pip install matplotlib", err=True)
        return False

    from .plotting import plot_comparison

    path.parent.mkdir(parents=True, exist_ok=True)
    fig, _ = plot_comparison(results, save_path=str(path), return_fig_ax=True)
    plt.close(fig)
    return True


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

@main.group()
def config() -> None:
    """
    Inputs file management commands.

    Create, validate and display calculator input files.
    """
    pass


@config.command("create")
@click.argument("output_file", type=click.Path(path_type=Path))
@click.pass_context
def config_create(ctx: click.Context, output_file: Path) -> None:
    """
    Create a new inputs file with the calculator defaults.

    Example:
        lumpsum config create my_inputs.json
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    from .config import MortgageInputsConfig
    from .serialization import save_inputs

    save_inputs(MortgageInputsConfig().to_inputs(), output_file)

    if not quiet:
        if console:
            console.print(f"[green]Created inputs file: {output_file}[/green]")
        else:
            click.echo(f"Created inputs file: {output_file}")


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, config_file: Path) -> None:
    """
    Validate an inputs file.

    Checks that the file is valid JSON and every value is in range.

    Example:
        lumpsum config validate inputs.json
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    from .serialization import load_inputs

    try:
        inputs = load_inputs(config_file)
    except (LumpSumError, ValueError, OSError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    if console and not quiet:
        from rich.panel import Panel

        lines = "\n".join(
            f"[cyan]{FIELD_LABELS[name]}:[/cyan] {getattr(inputs, name):g}" for name in FIELD_NAMES
        )
        console.print(Panel(lines, title="Inputs Valid", border_style="green"))
    else:
        click.echo("Configuration is valid")


@config.command("show")
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "table"]), default="table")
@click.pass_context
def config_show(ctx: click.Context, config_file: Path, output_format: str) -> None:
    """
    Display an inputs file.

    Example:
        lumpsum config show inputs.json --format json
    """
    console = ctx.obj.get("console")

    from .serialization import inputs_to_dict, load_inputs

    try:
        inputs = load_inputs(config_file)
    except (LumpSumError, ValueError, OSError) as e:
        click.echo(f"Error loading inputs: {e}", err=True)
        sys.exit(1)

    if output_format == "json" or not console:
        click.echo(json.dumps(inputs_to_dict(inputs), indent=2))
        return

    from rich.table import Table

    table = Table(title="Calculator Inputs")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    for name in FIELD_NAMES:
        table.add_row(FIELD_LABELS[name], f"{getattr(inputs, name):,g}")
    console.print(table)


# ---------------------------------------------------------------------------
# report
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--result", "-r",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to saved results file (JSON)"
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["summary", "yearly", "csv"]),
    default="summary",
    help="Output format (default: summary)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output file (for csv format)"
)
@click.pass_context
def report(
    ctx: click.Context,
    result: Path,
    output_format: str,
    output: Optional[Path],
) -> None:
    """
    Generate reports from saved results.

    Example:
        lumpsum report -r results/run.json --format yearly
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)
    display = ctx.obj["settings"].display()

    from .comparison import series_frame
    from .serialization import load_results
    from .utils import format_currency

    try:
        results = load_results(result)
    except (LumpSumError, ValueError, OSError) as e:
        click.echo(f"Error loading results: {e}", err=True)
        sys.exit(1)

    if output_format == "summary":
        _print_summary(results, console, quiet, display)
        return

    if not results.time_series:
        click.echo("No time series found in result file", err=True)
        sys.exit(1)

    if output_format == "yearly":
        frame = series_frame(results, yearly=True)

        def fmt(value: float) -> str:
            return format_currency(value, decimals=display.decimals, symbol=display.currency_symbol)

        if console and not quiet:
            from rich.table import Table

            table = Table(title="Yearly Growth")
            table.add_column("Year", style="cyan", justify="right")
            table.add_column(INVEST_LABEL, style="green", justify="right")
            table.add_column(PAY_DOWN_LABEL, style="blue", justify="right")
            for row in frame.itertuples():
                table.add_row(f"{row.year:g}", fmt(row.lump_sum_value), fmt(row.monthly_savings_value))
            console.print(table)
        else:
            for row in frame.itertuples():
                click.echo(f"{row.year:g}\t{fmt(row.lump_sum_value)}\t{fmt(row.monthly_savings_value)}")

    elif output_format == "csv":
        if not output:
            output = Path("report.csv")
        output.parent.mkdir(parents=True, exist_ok=True)
        series_frame(results).to_csv(output)
        if not quiet:
            click.echo(f"CSV report saved to {output}")


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers of the installed dependencies.
    """
    console = ctx.obj.get("console")

    info_lines = [
        f"LumpSum Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]

    dependencies = {
        "numpy": "numpy",
        "pandas": "pandas",
        "matplotlib": "matplotlib",
        "pydantic": "pydantic",
        "rich": "rich",
        "click": "click",
    }

    for name, module in dependencies.items():
        try:
            mod = __import__(module)
            version = getattr(mod, "__version__", "installed")
            info_lines.append(f"{name}: {version}")
        except ImportError:
            info_lines.append(f"{name}: not installed")

    if console:
        from rich.panel import Panel
        console.print(Panel("\n".join(info_lines), title="System Information"))
    else:
        for line in info_lines:
            click.echo(line)


if __name__ == "__main__":
    main()
