"""Agents line rendering.

Running subagents are shown first; remaining slots go to the most recently
completed ones::

    ◐ Explore [haiku]: Find auth code (12s) | ✓ Plan: Design API (1m 5s)
"""

from datetime import datetime

from activity_line.activity.formatting import format_duration, truncate_string
from activity_line.constants import (
    ICON_COMPLETED,
    ICON_RUNNING,
    MAX_RECENT_COMPLETED_AGENTS,
)
from activity_line.models.activity import ActivitySnapshot, AgentTask, Clock, utc_now
from activity_line.models.colors import apply_color
from activity_line.models.config import AgentsLineConfig


def _select_agents(snapshot: ActivitySnapshot, max_agents: int) -> list[AgentTask]:
    """Pick the agents to display: running ones, then recent completions."""
    selected = snapshot.running_agents()[:max_agents]

    remaining = max_agents - len(selected)
    if remaining > 0:
        # Reversed first so equal end times favour the later-started task
        completed = sorted(
            reversed(snapshot.completed_agents()),
            key=lambda a: a.end_time or a.start_time,
            reverse=True,
        )
        selected.extend(completed[: min(remaining, MAX_RECENT_COMPLETED_AGENTS)])

    return selected


def _format_agent(agent: AgentTask, config: AgentsLineConfig, now: datetime) -> str:
    if agent.is_running:
        icon = apply_color(ICON_RUNNING, config.running_icon_color)
    else:
        icon = apply_color(ICON_COMPLETED, config.completed_icon_color)
    agent_type = apply_color(agent.agent_type, config.agent_type_color)

    model_part = ""
    if agent.is_running and agent.model is not None:
        open_bracket = apply_color("[", config.dim_color)
        close_bracket = apply_color("]", config.dim_color)
        model_part = f" {open_bracket}{agent.model}{close_bracket}"

    description_part = ""
    if agent.description is not None:
        description_part = f": {truncate_string(agent.description, config.max_description_len)}"

    elapsed = apply_color(f"({format_duration(agent.elapsed(now))})", config.dim_color)
    return f"{icon} {agent_type}{model_part}{description_part} {elapsed}"


def render_agents_line(
    snapshot: ActivitySnapshot,
    config: AgentsLineConfig | None = None,
    clock: Clock = utc_now,
) -> str | None:
    """Render the agents activity line.

    Args:
        snapshot: Parsed session activity.
        config: Line configuration; defaults when omitted.
        clock: Source of the current time for running agents' elapsed time.

    Returns:
        The rendered line, or None when there are no agents to show.
    """
    config = config or AgentsLineConfig()
    agents = _select_agents(snapshot, config.max_agents)
    if not agents:
        return None

    now = clock()
    return config.separator.join(_format_agent(agent, config, now) for agent in agents)
