from .deploy import (
    DEFAULT_TARGET,
    DEPLOY_PATH,
    LOCAL_TARGET,
    DeployResult,
    DeployTarget,
    Status,
    StatusEnum,
)

__all__ = [
    "DEFAULT_TARGET",
    "DEPLOY_PATH",
    "LOCAL_TARGET",
    "DeployResult",
    "DeployTarget",
    "Status",
    "StatusEnum",
]
