from typing import Any

import httpx
from pydantic import PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from vespa_deploy.types import LOCAL_TARGET, DeployTarget


class _BaseClient(BaseSettings):
    """Base type for clients, to be used in Pydantic models to avoid circular imports.

    Settings can be passed to the Client constructor when creating an instance, or defined with environment variables
    having names prefixed with the string `VESPA_`, e.g. `VESPA_DISABLE_SSL`.

    An `httpx.Client` can be injected with the `http_client` argument: requests are then handed to its `send()`
    method, and the client is left open for the caller to reuse or inspect.
    """

    model_config = SettingsConfigDict(env_prefix="VESPA_")

    target: str = LOCAL_TARGET
    disable_ssl: bool = False
    timeout: float = 120.0

    _http_client: httpx.Client | None = PrivateAttr(default=None)

    def __init__(self, http_client: httpx.Client | None = None, **data: Any) -> None:
        super().__init__(**data)
        self._http_client = http_client

    @property
    def deploy_target(self) -> DeployTarget:
        """Returns the target with the `local` keyword resolved."""
        return DeployTarget.resolve(self.target)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Sends a single request, without following redirects or retrying."""
        if self._http_client is not None:
            return self._http_client.send(request)

        with httpx.Client(verify=not self.disable_ssl, timeout=self.timeout) as client:
            return client.send(request)
