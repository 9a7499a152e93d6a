"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CITYGRAPH_GRAPH_DATA_DIR=/path/to/data
- CITYGRAPH_GRAPH_GRAPH_FILE=europe.txt
- CITYGRAPH_GRAPH_DIRECTED=false
- CITYGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph description configuration.

    Environment variables prefixed with CITYGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "graph.txt"
    directed: bool = True
    sort_edges_by_weight: bool = False

    @property
    def graph_path(self) -> Path:
        """Full path to the graph description file."""
        return self.data_dir / self.graph_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class MenuConfig(BaseSettings):
    """Interactive menu configuration.

    Environment variables prefixed with CITYGRAPH_MENU_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_MENU_")

    clear_screen: bool = False
    separator: str = "-" * 40


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)

    Environment variables prefixed with CITYGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    menu: MenuConfig = Field(default_factory=MenuConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
