"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PATHFINDER_GRAPH_STRICT_WEIGHTS=true
- PATHFINDER_GRAPH_LOG_SEARCHES=true
- PATHFINDER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph behaviour configuration.

    Environment variables prefixed with PATHFINDER_GRAPH_.

    Attributes:
        strict_weights: Reject negative weights (and weights above the
            infinite sentinel) when edges are added. Off by default, in which
            case negative weights are accepted and Dijkstra results on them
            are undefined.
        log_searches: Emit a DEBUG record summarising every algorithm call.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_GRAPH_")

    strict_weights: bool = False
    log_searches: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHFINDER_LOG_. The level is
    case-insensitive on input and stored upper-case.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.strict_weights)
        print(config.observability.level)

    Environment variables prefixed with PATHFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.

    Raises:
        ConfigurationError: If an environment override fails validation.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        location = e.errors()[0]["loc"]
        raise ConfigurationError(
            "Invalid configuration",
            cause=e,
            setting_name=".".join(str(part) for part in location),
        ) from e


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Embedding applications usually own logging setup; this is a
    convenience for scripts and tests.

    Args:
        config: Settings to apply. Defaults to ``get_config().observability``.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level, format=config.format)
