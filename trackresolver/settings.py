"""Configuration for a single track-resolution node."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from pydantic import SecretStr

DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Immutable connection details for one node.

    The auth token is held as a ``SecretStr`` so it never shows up in ``repr``
    output or log lines built from the settings object.
    """

    host: str
    port: str
    auth_token: SecretStr
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.auth_token, SecretStr):
            object.__setattr__(self, "auth_token", SecretStr(self.auth_token))
        if not isinstance(self.port, str):
            object.__setattr__(self, "port", str(self.port))

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @classmethod
    def create(
        cls,
        host: str,
        port: str | int,
        auth_token: str | SecretStr,
        request_timeout: float | None = None,
    ) -> "ClientSettings":
        """Build settings from plain values, falling back to the default timeout."""
        return cls(
            host=host,
            port=str(port),
            auth_token=auth_token,  # type: ignore[arg-type]
            request_timeout=request_timeout or DEFAULT_REQUEST_TIMEOUT,
        )

    @classmethod
    def load(cls) -> "ClientSettings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can keep node credentials in a local
        .env file without exporting them globally.
        """
        load_dotenv()

        host = os.getenv("TRACK_NODE_HOST", "").strip()
        if not host:
            raise ValueError("TRACK_NODE_HOST is required but was not provided.")

        port = os.getenv("TRACK_NODE_PORT", "").strip()
        if not port:
            raise ValueError("TRACK_NODE_PORT is required but was not provided.")

        auth_token = os.getenv("TRACK_NODE_AUTH", "")
        if not auth_token:
            raise ValueError("TRACK_NODE_AUTH is required but was not provided.")

        timeout_raw = os.getenv("TRACK_NODE_TIMEOUT", "").strip() or str(DEFAULT_REQUEST_TIMEOUT)
        try:
            request_timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("TRACK_NODE_TIMEOUT must be a numeric value.") from exc
        if request_timeout <= 0:
            raise ValueError("TRACK_NODE_TIMEOUT must be greater than zero.")

        return cls(
            host=host,
            port=port,
            auth_token=SecretStr(auth_token),
            request_timeout=request_timeout,
        )
