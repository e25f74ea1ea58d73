"""Reading the status-line JSON that Claude Code pipes to the command."""

import json
import logging
import os
import select
import sys
from typing import IO, Any

from activity_line.constants import STDIN_READ_CHUNK_BYTES, STDIN_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def read_statusline_input(
    stream: IO[str] | None = None,
    timeout: float = STDIN_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """Read the status-line JSON object from stdin.

    Waits at most ``timeout`` seconds for data so a missing pipe never
    hangs the status line. Streams without a file descriptor (in-memory
    streams in tests) are read directly.

    Returns:
        The parsed object, or an empty dict when nothing usable arrived.
    """
    stream = stream or sys.stdin
    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        raw = stream.read()
    else:
        try:
            if not select.select([fd], [], [], timeout)[0]:
                logger.debug("No status-line input on stdin")
                return {}
            # os.read returns what is available instead of waiting for EOF
            raw = os.read(fd, STDIN_READ_CHUNK_BYTES).decode("utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Could not read stdin: {e}")
            return {}

    raw = raw.strip()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Status-line input is not valid JSON")
        return {}
    return data if isinstance(data, dict) else {}
