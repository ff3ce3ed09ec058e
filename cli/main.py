"""
subcomb CLI - Main entry point
Subdomain label-permutation generator
"""

import typer
from rich.console import Console
import sys
from typing import List, Optional

from cli.commands import generate, init

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="subcomb",
    help="subcomb - Subdomain Permutation Generator",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]}
)

console = Console()
err_console = Console(stderr=True)

# Register commands
app.command(name="generate", epilog=generate.EXAMPLES)(generate.generate_command)
app.command(name="init")(init.init_command)


def version_callback(value: bool):
    """Print version and exit"""
    if value:
        console.print(f"subcomb version {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def callback(
    show_version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True
    )
):
    """
    subcomb - Subdomain Permutation Generator

    Emit the base domain plus every ordering of a subdomain's labels.
    """
    pass


@app.command()
def version():
    """Show subcomb version"""
    version_callback(True)


COMMANDS = {"generate", "init", "version"}
ROOT_OPTIONS = {"--version", "--help", "-h"}


def with_default_command(argv: List[str]) -> List[str]:
    """Route `subcomb [OPTIONS] [SUBDOMAIN]` to the generate command"""
    if argv and (argv[0] in COMMANDS or argv[0] in ROOT_OPTIONS):
        return list(argv)
    return ["generate", *argv]


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = with_default_command(sys.argv[1:] if argv is None else argv)
    try:
        app(args=args, prog_name="subcomb")
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
