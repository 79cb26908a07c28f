"""CLI entry point for claude-relay."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import CONFIG_FILE, load_config
from ui.console import ConsoleLogger

console = Console()


def main():
    """Main CLI entry point."""
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg == "--config":
            console.print(f"[bold]Config:[/bold] {CONFIG_FILE}")
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        console.print(f"[red][ERROR][/red] Unknown argument: {arg}")
        _print_help()
        sys.exit(2)

    config = load_config()
    logger = ConsoleLogger(console)

    import uvicorn

    app = create_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level="warning",
    )
    server = uvicorn.Server(uvicorn_config)

    logger.startup(config.server.port, config.upstream.url)
    start_time = datetime.now()
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        logger.shutdown(str(duration))


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]Claude API Relay[/bold cyan]

Forwards POST /api/claude to the Anthropic messages API, moving the
body's credential field into the x-api-key header.

[bold]Usage:[/bold]
    claude-relay              Start the relay
    claude-relay --config     Show config location
    claude-relay --help       Show this help
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
