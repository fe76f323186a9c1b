"""Configuration Management with Pydantic.

This module implements the configuration models for the demo CLI: which
values to load into a linked list, which nodes and edges make up the graph,
where traversals start, and how logging is rendered. Configuration is read
from YAML (or JSON, which YAML parses) with environment variable overrides.
"""

import os
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator

logger = structlog.get_logger(__name__)

TRUE_VALUES = ("true", "1", "yes")


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render log entries as JSON instead of console text
    """

    level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ListConfig(BaseModel):
    """Linked list demo settings.

    Attributes:
        values: Integers appended to the list in order
        kth_from_end: Position from the tail to look up (1 is the tail)
    """

    values: list[int] = Field(
        default_factory=list,
        description="Values appended to the list",
    )
    kth_from_end: int = Field(
        default=1,
        ge=1,
        description="Position from the end to report",
    )


class EdgeConfig(BaseModel):
    """A directed edge between two node labels."""

    source: str = Field(min_length=1, description="Label the edge starts at")
    target: str = Field(min_length=1, description="Label the edge points to")

    model_config = {"str_strip_whitespace": True}


class GraphConfig(BaseModel):
    """Graph demo settings.

    Attributes:
        nodes: Node labels, added in order
        edges: Directed edges, added in order
        start: Label traversals start from (defaults to the first node)
    """

    nodes: list[str] = Field(
        default_factory=list,
        description="Node labels",
    )
    edges: list[EdgeConfig] = Field(
        default_factory=list,
        description="Directed edges",
    )
    start: str | None = Field(
        default=None,
        description="Traversal start label",
    )

    @field_validator("nodes")
    @classmethod
    def validate_nodes(cls, v: list[str]) -> list[str]:
        """Validate that node labels are non-empty and unique.

        Args:
            v: The node labels to validate

        Returns:
            The stripped labels

        Raises:
            ValueError: If a label is blank or repeated
        """
        labels = [label.strip() for label in v]
        if any(not label for label in labels):
            msg = "Node labels must not be empty"
            raise ValueError(msg)

        seen: set[str] = set()
        duplicates: set[str] = set()
        for label in labels:
            if label in seen:
                duplicates.add(label)
            seen.add(label)

        if duplicates:
            msg = f"Duplicate node labels: {', '.join(sorted(duplicates))}"
            raise ValueError(msg)
        return labels

    @property
    def start_label(self) -> str | None:
        """Configured start label, falling back to the first node."""
        if self.start:
            return self.start
        return self.nodes[0] if self.nodes else None


class StructuresConfig(BaseModel):
    """Main configuration combining all settings.

    Attributes:
        logging: Logging configuration
        linked_list: Linked list demo configuration
        graph: Graph demo configuration
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    linked_list: ListConfig = Field(default_factory=ListConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StructuresConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated StructuresConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config_data = cls._apply_env_overrides(config_data)
        config = cls(**config_data)

        logger.info(
            "configuration_loaded",
            logging_level=config.logging.level,
            node_count=len(config.graph.nodes),
        )

        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: STRUCTURES_<SECTION>_<KEY>

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("logging", "level"): "STRUCTURES_LOGGING_LEVEL",
            ("logging", "json_logs"): "STRUCTURES_JSON_LOGS",
            ("graph", "start"): "STRUCTURES_GRAPH_START",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            current = config_data
            for key in path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            if env_var.endswith("_LOGS"):
                value = value.lower() in TRUE_VALUES

            current[path[-1]] = value
            logger.debug(
                "env_override_applied",
                env_var=env_var,
                config_path=".".join(path),
            )

        return config_data

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of warnings.

        Returns:
            List of validation warning messages (empty if no warnings)
        """
        warnings = []
        declared = set(self.graph.nodes)

        for edge in self.graph.edges:
            missing = [label for label in (edge.source, edge.target) if label not in declared]
            if missing:
                warnings.append(
                    f"Edge {edge.source} -> {edge.target} references undeclared "
                    f"node(s): {', '.join(missing)}",
                )

        if self.graph.start and self.graph.start not in declared:
            warnings.append(f"Traversal start {self.graph.start!r} is not a declared node")

        if self.linked_list.values and self.linked_list.kth_from_end > len(self.linked_list.values):
            warnings.append(
                f"kth_from_end ({self.linked_list.kth_from_end}) exceeds the number of "
                f"list values ({len(self.linked_list.values)})",
            )

        return warnings


__all__ = [
    "EdgeConfig",
    "GraphConfig",
    "ListConfig",
    "LoggingConfig",
    "StructuresConfig",
]
