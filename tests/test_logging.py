"""Tests for console logging and log helpers."""

from rich.console import Console

from ui.console import ConsoleLogger
from ui.log_utils import extract_request_info, mask, write_cli_log


def test_mask():
    assert mask(None) == "-"
    assert mask("short") == "***"
    assert mask("sk-ant-api03-abcdefghijkl") == "sk-ant...ijkl"


def test_extract_request_info_uses_last_user_message():
    body = {
        "messages": [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "reply"},
            {"role": "user", "content": [{"type": "text", "text": "second\nline"}, {"type": "image"}]},
        ]
    }

    assert extract_request_info(body) == ("second line", 3)


def test_extract_request_info_without_messages():
    assert extract_request_info({"model": "m"}) == ("", 0)


def test_write_cli_log(tmp_path):
    log_file = tmp_path / "logs" / "relay.log"

    write_cli_log("ERROR", "boom", log_file=log_file, route="Anthropic", status=500)

    line = log_file.read_text()
    assert line.endswith("ERROR: boom route=Anthropic status=500\n")


def _logger(tmp_path):
    console = Console(record=True, width=200)
    return ConsoleLogger(console, log_file=tmp_path / "relay.log"), console


def test_console_logger_masks_credential(tmp_path):
    logger, console = _logger(tmp_path)

    logger.log_relay(
        "claude-sonnet",
        {"messages": [{"role": "user", "content": "hi"}]},
        "sk-ant-api03-secretsecret",
        path="/api/claude",
    )

    output = console.export_text()
    log_text = (tmp_path / "relay.log").read_text()
    assert "sk-ant-api03-secretsecret" not in output
    assert "sk-ant-api03-secretsecret" not in log_text
    assert "sk-ant...cret" in output
    assert logger.request_count == 1


def test_console_logger_error_line(tmp_path):
    logger, console = _logger(tmp_path)

    logger.log_error("Anthropic", 401, '{"error": "[bad] key"}')

    output = console.export_text()
    assert "Anthropic 401" in output
    assert "[bad] key" in output
    assert "ERROR" in (tmp_path / "relay.log").read_text()
    assert logger.error_count == 1


def test_startup_lines(tmp_path):
    logger, console = _logger(tmp_path)

    logger.startup(3000, "https://api.anthropic.com/v1/messages")

    lines = console.export_text().splitlines()
    assert lines == [
        "Claude API relay running on http://localhost:3000",
        "Ready to relay requests to https://api.anthropic.com/v1/messages",
    ]
