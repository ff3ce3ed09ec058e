"""
subcomb generate - Generate subdomain permutations
"""

import typer
from rich.console import Console
from rich.markup import escape
from pathlib import Path
from typing import Optional

from core.formatters import OutputFormat
from core.workflow import run_generation
from utils.error_handler import ErrorHandler, SubcombError
from utils.helpers import DEFAULT_CONFIG_PATH, load_config, resolve_options
from utils.logger import get_logger

err_console = Console(stderr=True)

EXAMPLES = """
[bold]Examples[/bold]

  subcomb sub.api.example.com

  subcomb -i subdomains.txt -o results.txt

  echo "sub.api.example.com" | subcomb

  subcomb -f json sub.api.example.com

  subcomb -f csv -i input.txt -o output.csv
"""


def generate_command(
    subdomain: Optional[str] = typer.Argument(
        None,
        help="Seed subdomain, e.g. sub.api.example.com"
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Read subdomains from input file"
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write results to output file (default: stdout)"
    ),
    unique: Optional[bool] = typer.Option(
        None, "--unique/--no-unique", "-u", help="Remove duplicate results"
    ),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--no-verbose", "-v", help="Enable verbose output on stderr"
    ),
    format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format (default: plain)", case_sensitive=False
    ),
    config_file: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Configuration file path"
    )
):
    """
    Generate every label-order permutation of a subdomain

    Keeps the last two labels as the base domain and emits the base domain
    plus every ordering of one or more of the labels in front of it.
    Input comes from --input, the SUBDOMAIN argument, or piped stdin;
    blank lines and lines starting with # are skipped.
    """
    config = load_config(str(config_file))
    options = resolve_options(
        config,
        unique=unique,
        verbose=verbose,
        format=format.value if format is not None else None,
    )

    logger = get_logger(config)
    logger.set_verbose(options["verbose"])
    handler = ErrorHandler(config)

    try:
        output_format = OutputFormat(options["format"])
    except ValueError:
        err_console.print(f"[bold red]Error:[/bold red] unknown output format '{escape(str(options['format']))}'")
        raise typer.Exit(2)

    try:
        run_generation(
            input_file=input_file,
            seed=subdomain,
            output_file=output_file,
            unique=options["unique"],
            verbose=options["verbose"],
            fmt=output_format,
        )
    except SubcombError as e:
        report = handler.handle_error(e, {"command": "generate"})
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        if report.get("suggestion") and options["verbose"]:
            err_console.print(f"[dim]{report['suggestion']}[/dim]")
        raise typer.Exit(report["exit_code"])
