import click

from vespa_deploy import Client
from vespa_deploy.types import StatusEnum

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
def status(config_profile: ConfigProfile, target: str | None) -> None:
    """Check whether the deploy service is ready."""
    client = Client(
        target=target or config_profile.target,
        disable_ssl=config_profile.insecure,
        timeout=config_profile.timeout,
    )

    status = call_deploy_service(client.deploy_target, client.config_server.status)

    if status.status == StatusEnum.READY:
        click.echo(
            format_outcome(Outcome.SUCCESS, f"Deploy API at {status.target} is ready")
        )
    else:
        click.echo(
            format_outcome(
                Outcome.FAILURE,
                f"Deploy API at {status.target} is not ready: {status.status_message}",
            )
        )
        raise click.exceptions.Exit(1)
