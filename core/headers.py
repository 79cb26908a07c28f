"""Header construction for upstream requests."""

from typing import Any


class HeaderBuilder:
    """Build upstream headers for the Anthropic messages API."""

    def __init__(self, anthropic_version: str = "2023-06-01") -> None:
        self.anthropic_version = anthropic_version

    def build_upstream_headers(self, credential: Any) -> dict[str, str]:
        """Inject the caller's credential next to the fixed protocol headers."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        # No key means no header; upstream rejects and the rejection is relayed
        if credential is not None:
            headers["x-api-key"] = str(credential)
        headers["anthropic-version"] = self.anthropic_version
        return headers
