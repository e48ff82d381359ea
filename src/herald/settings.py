"""
Process environment read once when a registry is created.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HeraldSettings(BaseSettings):
    """Deployment metadata and timestamp defaults."""

    model_config = SettingsConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    function_name: Optional[str] = Field(
        default=None,
        validation_alias="AWS_LAMBDA_FUNCTION_NAME",
        description="Deployment identifier stamped on every record",
    )
    function_version: Optional[str] = Field(
        default=None,
        validation_alias="AWS_LAMBDA_FUNCTION_VERSION",
        description="Deployment version stamped alongside the identifier",
    )
    fast_time: bool = Field(
        default=False,
        validation_alias="HERALD_FAST_TIME",
        description="Use epoch milliseconds instead of ISO-8601 timestamps",
    )

    def deployment_fields(self) -> dict[str, Optional[str]]:
        if not self.function_name:
            return {}
        return {
            "functionName": self.function_name,
            "functionVersion": self.function_version,
        }
