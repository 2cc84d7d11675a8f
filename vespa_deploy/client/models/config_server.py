"""Client functionalities to operate on the deploy service.

This module talks to the config server of a Vespa instance, by default
reachable at `http://127.0.0.1:19071`. Application packages are sent
as zip archives to the `prepareandactivate` endpoint in one request.
"""

from logging import getLogger

import httpx

from vespa_deploy.errors import ApplicationPackageError, DeployServiceError
from vespa_deploy.types import DeployResult, DeployTarget, Status, StatusEnum

from .model import Model

logger = getLogger(__name__)


class ConfigServer(Model):
    """A model representing the config server accepting deployments."""

    @property
    def target(self) -> DeployTarget:
        return DeployTarget.resolve(self.id)

    def deploy(self, package: bytes) -> DeployResult:
        """Prepares and activates an application package.

        Args:
            package: The zip archive bytes of the application package.

        Raises:
            ApplicationPackageError: If the deploy service rejected the package.
            DeployServiceError: If the deploy service failed handling the request.
        """
        request = httpx.Request(
            "POST",
            self.target.deploy_url,
            headers={"Content-Type": "application/zip"},
            content=package,
        )
        logger.debug(f"Deploying {len(package)} bytes to {request.url}")

        r = self.client.send(request)
        logger.debug(f"Deploy service answered with status {r.status_code}")

        if r.status_code >= 500:
            raise DeployServiceError(r.status_code, r.text, location=self.target.netloc)
        if r.status_code >= 400:
            raise ApplicationPackageError(r.status_code, r.text)

        return DeployResult(target=self.target.url, status_code=r.status_code, body=r.text)

    def status(self) -> Status:
        """Returns the status of the deploy service."""
        request = httpx.Request("GET", self.target.status_url)

        try:
            r = self.client.send(request)
        except httpx.ConnectError:
            return Status(
                status=StatusEnum.DOWN,
                status_message="Deploy service is down",
                target=self.target.url,
            )

        if r.status_code != 200:
            return Status(
                status=StatusEnum.UNHEALTHY,
                status_message=f"Status {r.status_code}: {r.text}",
                target=self.target.url,
            )

        return Status(
            status=StatusEnum.READY,
            status_message="Deploy service is ready",
            target=self.target.url,
        )
