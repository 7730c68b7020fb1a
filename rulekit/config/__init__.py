from rulekit.config.logging import configure_logging
from rulekit.config.settings import RulekitSettings

__all__ = ["configure_logging", "RulekitSettings"]
