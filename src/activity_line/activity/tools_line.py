"""Tools line rendering.

Renders the tools activity line, running tools first and then completed
tools aggregated by name::

    ◐ Edit: .../main.rs | ◐ Bash: cargo test | ✓ Read x12 | ✓ Grep x3 | ✗ Bash
"""

from dataclasses import dataclass

from activity_line.activity.formatting import truncate_path
from activity_line.constants import ICON_COMPLETED, ICON_ERROR, ICON_RUNNING
from activity_line.models.activity import ActivitySnapshot, ToolInvocation
from activity_line.models.colors import apply_color
from activity_line.models.config import ToolsLineConfig
from activity_line.models.enums import ToolStatus


@dataclass
class _ToolStats:
    """Finished invocations of one tool name."""

    name: str
    success_count: int = 0
    error_count: int = 0

    @property
    def total(self) -> int:
        return self.success_count + self.error_count

    @property
    def all_errors(self) -> bool:
        return self.success_count == 0 and self.error_count > 0


def _aggregate_completed(tools: list[ToolInvocation]) -> list[_ToolStats]:
    """Group finished invocations by name, largest groups first."""
    stats: dict[str, _ToolStats] = {}
    for tool in tools:
        entry = stats.setdefault(tool.name, _ToolStats(name=tool.name))
        if tool.status is ToolStatus.ERROR:
            entry.error_count += 1
        else:
            entry.success_count += 1
    # Stable sort: equal totals keep first-seen order
    return sorted(stats.values(), key=lambda s: s.total, reverse=True)


def _render_running(tool: ToolInvocation, config: ToolsLineConfig) -> str:
    icon = apply_color(ICON_RUNNING, config.running_icon_color)
    name = apply_color(tool.name, config.tool_name_color)
    if tool.target is None:
        return f"{icon} {name}"
    target = apply_color(truncate_path(tool.target, config.max_target_len), config.dim_color)
    return f"{icon} {name}: {target}"


def _render_completed(stats: _ToolStats, config: ToolsLineConfig) -> str:
    if stats.all_errors:
        icon = apply_color(ICON_ERROR, config.error_icon_color)
    else:
        icon = apply_color(ICON_COMPLETED, config.completed_icon_color)
    name = apply_color(stats.name, config.tool_name_color)
    if stats.total > 1:
        count = apply_color(f"x{stats.total}", config.dim_color)
        return f"{icon} {name} {count}"
    return f"{icon} {name}"


def render_tools_line(
    snapshot: ActivitySnapshot,
    config: ToolsLineConfig | None = None,
) -> str | None:
    """Render the tools activity line.

    Args:
        snapshot: Parsed session activity.
        config: Line configuration; defaults when omitted.

    Returns:
        The rendered line, or None when there is nothing to show.
    """
    config = config or ToolsLineConfig()

    # Most recently started first
    running = list(reversed(snapshot.running_tools()))[: config.max_running]
    parts = [_render_running(tool, config) for tool in running]

    completed = _aggregate_completed(snapshot.completed_tools())[: config.max_completed]
    parts.extend(_render_completed(stats, config) for stats in completed)

    if not parts:
        return None
    return config.separator.join(parts)
