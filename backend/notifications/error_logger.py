"""
Error logging utility for the distribution system.

Writes distribution, dispatch and resend failures to timestamped report files
so an operator can see which recipients were affected.
"""

import os
from datetime import datetime
from typing import Any


def _get_log_dir() -> str:
    default_dir = os.path.join(os.path.dirname(__file__), "logs")
    return os.getenv("NOTIFICATION_LOG_DIR", default_dir)


def log_notification_error(
    error_type: str, error_message: str, context: dict[str, Any] | None = None
) -> str:
    """
    Log a notification error to a timestamped file.

    Args:
        error_type: Type of error (e.g., 'distribution', 'dispatch', 'logging', 'resend')
        error_message: The error message
        context: Optional dictionary with additional context (publication_id, email, etc.)

    Returns:
        Path to the log file created
    """
    log_dir = _get_log_dir()
    os.makedirs(log_dir, exist_ok=True)

    # Microseconds keep concurrent failures in one run from sharing a file
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = os.path.join(log_dir, f"{error_type}_error_{timestamp}.txt")

    with open(filename, "w", encoding="utf-8") as f:
        f.write(f"Distribution Error Report - {datetime.now()}\n")
        f.write("=" * 60 + "\n\n")
        f.write(f"Error Type: {error_type}\n")
        f.write(f"Error Message: {error_message}\n\n")

        if context:
            f.write("Context:\n")
            f.write("-" * 60 + "\n")
            for key, value in context.items():
                f.write(f"{key}: {value}\n")

    return filename
