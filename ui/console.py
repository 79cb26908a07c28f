"""Console request logger for the relay."""

from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any

from rich.console import Console

from ui.log_utils import extract_request_info, mask, write_cli_log


class ConsoleLogger:
    """Print relayed requests and upstream failures, mirrored to the log file."""

    def __init__(self, console: Console | None = None, log_file: Path | None = None):
        self.console = console or Console()
        self.log_file = log_file
        self._lock = Lock()
        self._request_count = 0
        self._error_count = 0

    @property
    def request_count(self) -> int:
        return self._request_count

    @property
    def error_count(self) -> int:
        return self._error_count

    def startup(self, port: int, upstream_url: str) -> None:
        """Announce the listening address."""
        self.console.print(f"[bold cyan]Claude API relay running on http://localhost:{port}[/bold cyan]")
        self.console.print(f"[dim]Ready to relay requests to {upstream_url}[/dim]")
        write_cli_log("STARTUP", "Relay started", log_file=self.log_file, port=port)

    def shutdown(self, duration: str) -> None:
        """Record the stop time and totals in the log file."""
        write_cli_log(
            "SHUTDOWN",
            "Relay stopped",
            log_file=self.log_file,
            duration=duration,
            requests=self._request_count,
            errors=self._error_count,
        )

    def log_relay(
        self,
        model: str,
        body: dict[str, Any],
        credential: Any,
        *,
        path: str,
    ) -> None:
        """Log a request on its way upstream. The credential is masked."""
        with self._lock:
            self._request_count += 1
            prompt, message_count = extract_request_info(body)
            timestamp = datetime.now().strftime("%H:%M:%S")
            self.console.print(
                f"[dim]{timestamp}[/dim] [blue]{path}[/blue] {model} "
                f"messages={message_count} key={mask(credential)}"
            )
            write_cli_log(
                "RELAY",
                prompt[:200],
                log_file=self.log_file,
                model=model,
                messages=message_count,
                key=mask(credential),
            )

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an upstream failure."""
        with self._lock:
            self._error_count += 1
            truncated = message[:200] + "..." if len(message) > 200 else message
            # Upstream error text is arbitrary; keep rich from parsing it as markup
            self.console.print(f"[red bold]![/red bold] {route} {status}: ", end="")
            self.console.print(truncated, markup=False, style="red")
            write_cli_log("ERROR", message[:200], log_file=self.log_file, route=route, status=status)
