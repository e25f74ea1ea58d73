"""Rendering configuration models for activity-line."""

from collections.abc import Callable
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from activity_line.constants import (
    COLOR16_CYAN,
    COLOR16_GRAY,
    COLOR16_GREEN,
    COLOR16_MAGENTA,
    COLOR16_RED,
    COLOR16_YELLOW,
    DEFAULT_MAX_AGENTS,
    DEFAULT_MAX_COMPLETED_TOOLS,
    DEFAULT_MAX_DESCRIPTION_LEN,
    DEFAULT_MAX_RUNNING_TOOLS,
    DEFAULT_MAX_TARGET_LEN,
    DEFAULT_SEPARATOR,
)
from activity_line.exceptions import ConfigurationError
from activity_line.models.colors import AnsiColor, Color16


def _color16(index: int) -> Callable[[], Color16]:
    return lambda: Color16(c16=index)


class ToolsLineConfig(BaseModel):
    """Tools line configuration."""

    max_running: int = Field(
        default=DEFAULT_MAX_RUNNING_TOOLS, ge=0, description="Running tools to show"
    )
    max_completed: int = Field(
        default=DEFAULT_MAX_COMPLETED_TOOLS,
        ge=0,
        description="Distinct completed tool names to show",
    )
    max_target_len: int = Field(
        default=DEFAULT_MAX_TARGET_LEN, ge=0, description="Maximum length of a tool target"
    )
    running_icon_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_YELLOW))
    completed_icon_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_GREEN))
    error_icon_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_RED))
    tool_name_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_CYAN))
    dim_color: AnsiColor | None = Field(
        default_factory=_color16(COLOR16_GRAY), description="Counts and targets"
    )
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Separator between entries")

    def without_colors(self) -> "ToolsLineConfig":
        """Return a copy that renders plain text."""
        return self.model_copy(
            update={
                "running_icon_color": None,
                "completed_icon_color": None,
                "error_icon_color": None,
                "tool_name_color": None,
                "dim_color": None,
            }
        )


class AgentsLineConfig(BaseModel):
    """Agents line configuration."""

    max_agents: int = Field(default=DEFAULT_MAX_AGENTS, ge=0, description="Agents to show")
    max_description_len: int = Field(
        default=DEFAULT_MAX_DESCRIPTION_LEN,
        ge=0,
        description="Maximum length of an agent description",
    )
    running_icon_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_YELLOW))
    completed_icon_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_GREEN))
    agent_type_color: AnsiColor | None = Field(default_factory=_color16(COLOR16_MAGENTA))
    dim_color: AnsiColor | None = Field(
        default_factory=_color16(COLOR16_GRAY), description="Elapsed time and model brackets"
    )
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Separator between agents")

    def without_colors(self) -> "AgentsLineConfig":
        """Return a copy that renders plain text."""
        return self.model_copy(
            update={
                "running_icon_color": None,
                "completed_icon_color": None,
                "agent_type_color": None,
                "dim_color": None,
            }
        )


class ActivityLinesConfig(BaseModel):
    """Which activity lines to show and how to render them."""

    show_tools: bool = Field(default=True, description="Show the tools line")
    show_agents: bool = Field(default=True, description="Show the agents line")
    tools: ToolsLineConfig = Field(default_factory=ToolsLineConfig)
    agents: AgentsLineConfig = Field(default_factory=AgentsLineConfig)

    @classmethod
    def tools_only(cls) -> "ActivityLinesConfig":
        return cls(show_agents=False)

    @classmethod
    def agents_only(cls) -> "ActivityLinesConfig":
        return cls(show_tools=False)

    @classmethod
    def none(cls) -> "ActivityLinesConfig":
        return cls(show_tools=False, show_agents=False)

    def without_colors(self) -> "ActivityLinesConfig":
        return self.model_copy(
            update={
                "tools": self.tools.without_colors(),
                "agents": self.agents.without_colors(),
            }
        )

    @classmethod
    def load(cls, config_path: Path) -> "ActivityLinesConfig":
        """Load configuration from a YAML file.

        A missing or empty file yields the defaults.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid
                YAML, or does not describe a valid configuration.
        """
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", config_file=config_path) from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config: {e}", config_file=config_path) from e

        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("Config root must be a mapping", config_file=config_path)

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(first["msg"], config_file=config_path, key=key) from e

    def save(self, config_path: Path) -> None:
        """Save configuration to a YAML file, creating parent directories."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
