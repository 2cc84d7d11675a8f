import click
from rich.console import Console
from rich.table import Table

from vespa_deploy.types import DeployTarget

from .internal.config import Config, ConfigProfile, load_config

_TRUE_VALUES = ("y", "yes", "t", "true", "on", "1")
_FALSE_VALUES = ("n", "no", "f", "false", "off", "0")


def _strtobool(val: str) -> bool:
    """Convert a string representation of truth to True or False.

    Raises ValueError if 'val' is not one of the accepted spellings.
    """
    val = val.lower()
    if val in _TRUE_VALUES:
        return True
    if val in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid truth value {val!r}")


def _get_profile(config: Config, name: str) -> ConfigProfile:
    if name not in config.profiles:
        raise click.ClickException(f"Cannot find profile '{name}' in the config file.")
    return config.profiles[name]


@click.group
@click.pass_context
def config(ctx: click.Context) -> None:
    """Manage configuration profiles and settings.

    Profiles hold the deploy target, SSL and timeout settings used by the
    other commands.
    """
    # The config file path comes from the root command
    ctx.obj = load_config(ctx.parent.params["config"])  # type: ignore


@click.command()
@click.pass_obj
def get_profiles(config: Config) -> None:
    """List all available configuration profiles."""
    table = Table(box=None)
    table.add_column("Current")
    table.add_column("Profile")
    table.add_column("Target")
    table.add_column("Timeout")

    for name, profile in config.profiles.items():
        current = "*" if name == config.current_profile else ""
        table.add_row(
            current,
            name,
            DeployTarget.resolve(profile.target).url,
            str(profile.timeout),
        )

    console = Console()
    console.print(table)


@click.command()
@click.pass_obj
def current_profile(config: Config) -> None:
    """Display the name of the currently active profile."""
    click.echo(config.current_profile)


@click.command()
@click.pass_obj
@click.argument("profile")
def use_profile(config: Config, profile: str) -> None:
    """Switch to using a different profile."""
    _get_profile(config, profile)

    config.current_profile = profile
    config.write()


@click.command()
@click.pass_obj
@click.argument("param")
@click.argument("value")
def set_profile_vars(config: Config, param: str, value: str) -> None:
    """Set a variable for the current profile.

    Args:
        param: One of `target`, `insecure` or `timeout`
        value: The value to set for the parameter

    Raises:
        ClickException: If the parameter name or its value is not valid
    """
    current = config.profiles[config.current_profile]
    param = param.strip().lower()
    if param not in ConfigProfile.model_fields:
        raise click.ClickException(f"Unknown parameter '{param}'.")

    try:
        if param == "insecure":
            current.insecure = _strtobool(value)
        else:
            # Validate through the model so `target` gets the same checks as on load
            updated = ConfigProfile(**{**current.model_dump(), param: value})
            setattr(current, param, getattr(updated, param))
    except Exception as e:
        raise click.ClickException(
            f"Error setting {param}={value} for profile '{config.current_profile}': {e}"
        )

    config.write()
    click.echo(f"Set {param}={value} for profile '{config.current_profile}'")


@click.command()
@click.pass_obj
@click.argument("profile")
def delete_profile(config: Config, profile: str) -> None:
    """Delete a profile from the configuration.

    The profile currently in use cannot be deleted.
    """
    _get_profile(config, profile)

    if profile == config.current_profile:
        raise click.ClickException(
            f"Cannot delete profile '{profile}' because it is currently in use. "
            "Switch to another profile with 'vespa config use-profile' first."
        )

    del config.profiles[profile]
    config.write()

    click.echo(f"Profile '{profile}' has been deleted.")


@click.command()
@click.pass_obj
@click.argument("old_name")
@click.argument("new_name")
def rename_profile(config: Config, old_name: str, new_name: str) -> None:
    """Rename a profile in the configuration."""
    profile = _get_profile(config, old_name)

    if new_name in config.profiles:
        raise click.ClickException(
            f"Profile '{new_name}' already exists in the config file."
        )

    config.profiles[new_name] = profile
    del config.profiles[old_name]

    if config.current_profile == old_name:
        config.current_profile = new_name

    config.write()

    click.echo(f"Profile '{old_name}' has been renamed to '{new_name}'.")


config.add_command(get_profiles)
config.add_command(current_profile)
config.add_command(use_profile)
config.add_command(set_profile_vars)
config.add_command(delete_profile)
config.add_command(rename_profile)
