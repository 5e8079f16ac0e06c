"""Connection information for downstream data stores."""

from pydantic import BaseModel, ConfigDict, Field


class ConnectionInfo(BaseModel):
    """How to connect to a downstream data store."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Logical connection name")
    connection_string: str = Field(..., min_length=1, description="Connection string or URL")
    provider_name: str = Field(..., min_length=1, description="Driver/provider that understands the connection string")
