from enum import Enum
from typing import Any, Callable, TypeVar

import click
import httpx

from vespa_deploy.types import DeployTarget

_R = TypeVar("_R")


class Outcome(Enum):
    SUCCESS = "green"
    FAILURE = "red"


def format_outcome(outcome: Outcome, message: str) -> str:
    """Returns `message` wrapped in the ANSI color codes of `outcome`."""
    return click.style(message, fg=outcome.value)


def call_deploy_service(
    target: DeployTarget, fn: Callable[..., _R], *args: Any, **kwargs: Any
) -> _R:
    try:
        return fn(*args, **kwargs)
    except httpx.ConnectError:
        raise click.ClickException(
            f"Deploy service at {target.url} is not responding, check the target address is correct and try again."
        )
    except httpx.TransportError as e:
        raise click.ClickException(f"Request to {target.url} failed: {e}")
