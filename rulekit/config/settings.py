"""Settings read from `RULEKIT_*` environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class RulekitSettings(BaseSettings):
    """Runtime settings.

    Attributes:
        verbose: Emit DEBUG logs from the `rulekit` logger
        log_json: Render logs as JSON lines instead of console output
    """

    model_config = SettingsConfigDict(env_prefix="RULEKIT_", frozen=True)

    verbose: bool = False
    log_json: bool = False
