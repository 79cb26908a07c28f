"""Request body transformations before forwarding."""

from typing import Any


class RequestTransformer:
    """Separate the caller's credential from the payload sent upstream."""

    def __init__(self, credential_field: str = "credential") -> None:
        self.credential_field = credential_field

    def split_credential(self, body: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        """Return (credential, payload) with the credential field excluded.

        The inbound mapping is left untouched; nested values are shared, not copied.
        """
        credential = body.get(self.credential_field)
        payload = {key: value for key, value in body.items() if key != self.credential_field}
        return credential, payload
