from pydantic import BaseModel, ConfigDict, Field

from vespa_deploy.client.base import _BaseClient


class _Base(BaseModel):
    """The base model provides fields common to derived models."""

    client: _BaseClient = Field(exclude=True)

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Model(_Base):
    id: str
