"""
CLI entry point for featurerun.
"""
import sys
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_traceback
from .config import get_config
from .core.errors import ConfigurationError

console = Console()

def main():
    install_rich_traceback(show_locals=False)
    try:
        # Initialize configuration and check it before the commands load
        get_config().log_level
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)

    from .cli.cli import cli

    # Run CLI
    cli()

if __name__ == "__main__":
    main()
