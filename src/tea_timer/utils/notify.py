"""Desktop notification when the tea is ready."""
from __future__ import annotations

import subprocess

from loguru import logger

from tea_timer.config import APP_NAME, DEFAULT_NOTIFY_TIMEOUT_MS, READY_MESSAGE


def notify_ready(
    title: str = APP_NAME,
    message: str = READY_MESSAGE,
    timeout_ms: int = DEFAULT_NOTIFY_TIMEOUT_MS,
) -> bool:
    """Pop up the 'tea is ready' notification through notify-send.

    Never raises: a missing notify-send or a failed call is only logged,
    the caller prints the ready message either way.
    """
    cmd = ["notify-send", title, message, f"--expire-time={timeout_ms}"]
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=5)
    except FileNotFoundError:
        logger.debug("notify-send not available, skipping notification")
        return False
    except (OSError, subprocess.SubprocessError) as e:
        logger.error("Could not show tea notification: {}", e)
        return False

    if result.returncode != 0:
        logger.warning("notify-send exited with code {}", result.returncode)
        return False
    logger.debug("Tea notification shown ({} ms)", timeout_ms)
    return True
