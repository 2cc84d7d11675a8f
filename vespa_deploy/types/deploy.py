from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict

DEFAULT_TARGET = "http://127.0.0.1:19071"
LOCAL_TARGET = "local"
DEPLOY_PATH = "/application/v2/tenant/default/prepareandactivate"


class DeployTarget(BaseModel):
    """
    The base URL of a deploy service.

    Attributes:
        url (str):
            The base URL, without trailing slash, e.g. `http://127.0.0.1:19071`.
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_TARGET

    @classmethod
    def resolve(cls, target: str | None = None) -> "DeployTarget":
        """Build a target from a `-t` value, where None and `local` mean the default."""
        if not target or target == LOCAL_TARGET:
            return cls(url=DEFAULT_TARGET)
        return cls(url=target.rstrip("/"))

    @property
    def netloc(self) -> str:
        """The `host:port` part of the target URL."""
        return urlparse(self.url).netloc

    @property
    def deploy_url(self) -> str:
        return f"{self.url}{DEPLOY_PATH}"

    @property
    def status_url(self) -> str:
        return f"{self.url}/status.html"


class DeployResult(BaseModel):
    """
    The outcome of a successful deploy.

    Attributes:
        target (str):
            The base URL the application package was sent to.
        status_code (int):
            The HTTP status returned by the deploy service.
        body (str):
            The raw response body.
    """

    target: str
    status_code: int
    body: str = ""


class StatusEnum(Enum):
    READY = "Ready"
    UNHEALTHY = "Unhealthy"
    DOWN = "Down"


class Status(BaseModel):
    status: StatusEnum
    status_message: str
    target: str
