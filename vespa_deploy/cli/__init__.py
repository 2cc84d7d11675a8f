from pathlib import Path

import click

from .config import config as config_cmd
from .deploy import deploy as deploy_cmd
from .internal.config import DEFAULT_PROFILE_NAME, load_config
from .status import status as status_cmd


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(prog_name="vespa")
@click.option(
    "-c",
    "--config",
    type=Path,
    default=None,
    help="Path to vespa config file",
)
@click.option(
    "-p",
    "--profile",
    type=str,
    default=None,
    help="Configuration profile to use",
)
@click.option(
    "-k",
    "--insecure",
    default=None,
    type=bool,
    is_flag=True,
    help="Disable SSL certificate verification",
)
@click.option(
    "--timeout",
    default=None,
    type=float,
    help="Timeout on deploy service HTTP requests",
)
@click.pass_context
def vespa(
    ctx: click.Context,
    config: Path,
    profile: str,
    insecure: bool,
    timeout: float,
) -> None:
    try:
        config_obj = load_config(config)
    except Exception as e:
        raise click.ClickException(f"Cannot load config file: {e}")

    profile = profile or config_obj.current_profile or DEFAULT_PROFILE_NAME
    if profile not in config_obj.profiles:
        raise click.ClickException(f"Profile {profile} does not exist.")
    config_profile = config_obj.profiles[profile]
    # Parameters passed via command line take precedence
    config_profile.insecure = insecure or config_profile.insecure
    config_profile.timeout = timeout or config_profile.timeout

    ctx.obj = config_profile
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())  # show the help if no subcommand was provided


vespa.add_command(deploy_cmd)
vespa.add_command(status_cmd)
vespa.add_command(config_cmd)
