from typing import Iterator

import httpx
import pytest

from vespa_deploy.client import Client


class MockDeployService:
    """Records the last request received and answers with a canned response."""

    def __init__(self) -> None:
        self.last_request: httpx.Request | None = None
        self.next_status = 200
        self.next_body = ""
        self.raise_error: Exception | None = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.last_request = request
        if self.raise_error is not None:
            raise self.raise_error
        return httpx.Response(self.next_status, text=self.next_body)


@pytest.fixture
def deploy_service() -> MockDeployService:
    return MockDeployService()


@pytest.fixture
def http_client(deploy_service: MockDeployService) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(deploy_service.handle)) as c:
        yield c


@pytest.fixture
def client(http_client: httpx.Client) -> Client:
    return Client(http_client=http_client)
