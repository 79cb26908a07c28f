"""Relay orchestration for inbound requests."""

from typing import Any

from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.request_types import PreparedRequest
from core.transform import RequestTransformer


class RelayService:
    """Prepare inbound bodies for the upstream messages API."""

    def __init__(
        self,
        config: Config,
        logger: RequestLogger,
        transformer: RequestTransformer,
        header_builder: HeaderBuilder,
    ) -> None:
        self._config = config
        self._logger = logger
        self._transformer = transformer
        self._headers = header_builder

    def prepare(self, body: dict[str, Any], *, path: str) -> PreparedRequest:
        """Strip the credential and build the outbound request."""
        credential, payload = self._transformer.split_credential(body)
        headers = self._headers.build_upstream_headers(credential)
        model = str(payload.get("model", "unknown"))
        self._logger.log_relay(model, payload, credential, path=path)
        return PreparedRequest(self._config.upstream.url, headers, payload, model)
