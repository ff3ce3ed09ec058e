"""
subcomb init - Initialize subcomb configuration
"""

import typer
from rich.console import Console
from rich.prompt import Confirm
from pathlib import Path

console = Console(stderr=True)


DEFAULT_CONFIG = """# subcomb configuration
# Values may reference environment variables: ${VAR} or ${VAR:-default}

defaults:
  unique: "${SUBCOMB_UNIQUE:-true}"
  verbose: "${SUBCOMB_VERBOSE:-false}"
  format: "${SUBCOMB_FORMAT:-plain}"   # plain, json or csv

logging:
  level: INFO
  # path: ./logs/subcomb.log
"""


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".subcomb",
        "--config-dir",
        "-c",
        help="Configuration directory"
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration"
    )
):
    """
    Initialize subcomb configuration

    Writes a default subcomb.yaml that `subcomb generate` picks up.
    """
    console.print("[bold cyan]Initializing subcomb...[/bold cyan]\n")

    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "subcomb.yaml"

    if config_file.exists() and not force:
        if not Confirm.ask(f"Config file already exists at {config_file}. Overwrite?", console=console):
            console.print("[yellow]Skipping configuration file[/yellow]")
            return

    _write_default_config(config_file)

    console.print(f"\n[bold green]✓ subcomb initialized successfully![/bold green]")
    console.print(f"Next steps:")
    console.print(f"  1. Edit {config_file} to change the default format or logging")
    console.print(f"  2. Run 'subcomb generate sub.api.example.com'")


def _write_default_config(dest: Path):
    """Write the default configuration file"""
    with open(dest, "w") as f:
        f.write(DEFAULT_CONFIG)

    console.print(f"[green]✓[/green] Created configuration file at {dest}")
