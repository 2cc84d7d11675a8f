from .base import _BaseClient
from .models import ConfigServer


class Client(_BaseClient):
    """The vespa-deploy Python client.

    Example usage:
    ```py
    from pathlib import Path

    from vespa_deploy.application import application_package
    from vespa_deploy.client import Client

    c = Client(target="http://config-server:19071")
    result = c.config_server.deploy(application_package(Path("my-app")))
    ```
    """

    @property
    def config_server(self) -> ConfigServer:
        """Returns the ConfigServer model for the resolved target."""
        return ConfigServer(client=self, id=self.deploy_target.url)
