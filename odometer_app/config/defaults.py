"""Default configuration parameters for the odometer counter."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class CounterParams:
    """Counter shape and parsing policy."""
    max_groups: int = 10                 # Groups held before wrapping to minimum
    separator: str = "-"                 # Between groups in text form
    strict_parse: bool = False           # Raise on bad text instead of falling back

    @classmethod
    def from_dict(cls, params: dict[str, Any]) -> "CounterParams":
        """Build from a merged config section, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in params.items() if k in known})


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    counter: CounterParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        counter=CounterParams(),
        logging=LoggingParams(),
    )
