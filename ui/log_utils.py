"""Shared logging utilities."""

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

LOG_ROOT = Path.cwd() / "logs"
CLI_LOG_FILE = LOG_ROOT / "relay.log"


def extract_request_info(body: dict[str, Any]) -> tuple[str, int]:
    """Extract prompt preview and message count from a messages payload.

    Returns:
        Tuple of (prompt_text, message_count)
    """
    messages = body.get("messages")
    if not isinstance(messages, list):
        return "", 0

    prompt = ""
    # Last user message is what the caller just asked
    last_user_msg = next(
        (m for m in reversed(messages) if isinstance(m, dict) and m.get("role") == "user"),
        None,
    )
    if last_user_msg:
        content = last_user_msg.get("content", "")
        if isinstance(content, list):
            texts = [
                b.get("text", "")
                for b in content
                if isinstance(b, dict) and b.get("type") == "text"
            ]
            content = " ".join(texts)
        prompt = content.replace("\n", " ").strip() if isinstance(content, str) else ""

    return prompt, len(messages)


def write_cli_log(
    level: str,
    message: str,
    *,
    log_file: Path | None = None,
    **extra: Any,
) -> None:
    """Append a line to the rolling CLI log file."""
    log_file = log_file or CLI_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
    extra_str = " ".join(f"{k}={v}" for k, v in extra.items()) if extra else ""
    line = f"[{timestamp}] {level}: {message}"
    if extra_str:
        line += f" {extra_str}"
    line += "\n"
    with log_file.open("a") as f:
        f.write(line)


def mask(value: Any) -> str:
    """Mask a credential for display."""
    if value is None:
        return "-"
    value = str(value)
    if len(value) <= 10:
        return "***"
    return value[:6] + "..." + value[-4:]
