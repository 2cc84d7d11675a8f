from pathlib import Path

import click

from vespa_deploy import Client
from vespa_deploy.application import application_package
from vespa_deploy.errors import VespaDeployError

from .internal.config import ConfigProfile
from .utils import Outcome, call_deploy_service, format_outcome


@click.command()
@click.pass_obj  # config_profile
@click.option(
    "-t",
    "--target",
    type=str,
    default=None,
    help="Deploy service URL, or 'local' for http://127.0.0.1:19071",
)
@click.argument(
    "application",
    type=click.Path(exists=True, resolve_path=True, path_type=Path),  # type: ignore
)
def deploy(
    config_profile: ConfigProfile,
    target: str | None,
    application: Path,
) -> None:
    """Deploy an application directory or zip file."""
    client = Client(
        target=target or config_profile.target,
        disable_ssl=config_profile.insecure,
        timeout=config_profile.timeout,
    )

    try:
        package = application_package(application)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    try:
        call_deploy_service(
            client.deploy_target, client.config_server.deploy, package
        )
    except VespaDeployError as e:
        click.echo(format_outcome(Outcome.FAILURE, str(e)))
        raise click.exceptions.Exit(1)

    click.echo(format_outcome(Outcome.SUCCESS, "Success"))
