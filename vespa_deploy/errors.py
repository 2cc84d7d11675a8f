class VespaDeployError(Exception):
    """Base class for errors returned by the deploy service."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"Deploy failed (Status {self.status_code}):\n{self.body}"

    def __str__(self) -> str:
        return self.message


class ApplicationPackageError(VespaDeployError):
    """The deploy service rejected the application package (4xx)."""

    @property
    def message(self) -> str:
        return f"Invalid application package (Status {self.status_code}):\n{self.body}"


class DeployServiceError(VespaDeployError):
    """The deploy service failed to handle the request (5xx).

    Args:
        location: `host:port` of the deploy service that answered.
    """

    def __init__(self, status_code: int, body: str, location: str) -> None:
        self.location = location
        super().__init__(status_code, body)

    @property
    def message(self) -> str:
        return (
            f"Error from deploy service at {self.location} "
            f"(Status {self.status_code}):\n{self.body}"
        )
