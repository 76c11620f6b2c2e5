"""Provider configuration management."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.chain import SpecId


class ProviderConfig(BaseSettings):
    """Provider configuration from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SIMNODE_", extra="ignore")

    # Chain
    chain_id: int = 31337
    hardfork: str = "CANCUN"

    # Mining
    allow_blocks_with_same_timestamp: bool = False

    # Failed transactions are raised as errors instead of returned as results
    bail_on_call_failure: bool = False
    bail_on_transaction_failure: bool = True

    # API Server
    api_host: str = "127.0.0.1"
    api_port: int = 8545

    # Logging
    log_level: str = "INFO"

    @field_validator("hardfork")
    @classmethod
    def _check_hardfork(cls, value: str) -> str:
        value = value.upper()
        if value not in SpecId.__members__:
            raise ValueError(f"Unknown hardfork {value}")
        return value

    @property
    def spec_id(self) -> SpecId:
        """Parse the configured hardfork name."""
        return SpecId[self.hardfork]


config = ProviderConfig()
