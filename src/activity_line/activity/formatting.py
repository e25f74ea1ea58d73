"""Formatting primitives shared by the tools and agents lines."""

from datetime import timedelta

from activity_line.constants import ELLIPSIS, PATH_ELLIPSIS_PREFIX


def format_duration(duration: timedelta | float) -> str:
    """Format an elapsed time in coarse buckets.

    Under a second is ``<1s``, under a minute ``{n}s``, otherwise ``{m}m``
    or ``{m}m {s}s``. Fractions of a second are dropped.

    Args:
        duration: Elapsed time as a timedelta or a number of seconds.

    Returns:
        Human-readable duration.
    """
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()
    secs = int(duration) if duration > 0 else 0

    if secs < 1:
        return "<1s"
    if secs < 60:
        return f"{secs}s"

    mins, remaining = divmod(secs, 60)
    if remaining == 0:
        return f"{mins}m"
    return f"{mins}m {remaining}s"


def truncate_string(text: str, max_len: int) -> str:
    """Truncate text to ``max_len`` characters, ending with an ellipsis.

    Limits of three characters or fewer leave room for nothing but the
    ellipsis itself.
    """
    if len(text) <= max_len:
        return text
    if max_len <= len(ELLIPSIS):
        return ELLIPSIS
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS


def truncate_path(path: str, max_len: int) -> str:
    """Shorten a file path, keeping the filename visible.

    Backslashes are normalized to forward slashes first. A path that does
    not fit becomes ``.../<filename>`` when that fits, otherwise the
    filename alone is truncated.

    Examples:
        >>> truncate_path("very/long/path/to/file.rs", 15)
        '.../file.rs'
        >>> truncate_path("src/main.rs", 20)
        'src/main.rs'
    """
    normalized = path.replace("\\", "/")
    if len(normalized) <= max_len:
        return normalized

    filename = normalized.rsplit("/", 1)[-1]
    if len(PATH_ELLIPSIS_PREFIX) + len(filename) <= max_len:
        return PATH_ELLIPSIS_PREFIX + filename
    return truncate_string(filename, max_len)
