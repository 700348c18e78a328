"""
Logging utilities for the role recommendation backend.

Provides standardized logger configuration following security and privacy rules.

CRITICAL SECURITY RULES:
- NEVER log the Supabase service role key or the Google API key
- NEVER log the free-text parts of a discovery profile (additional_info)
- NEVER log full raw model replies at INFO level (truncate, DEBUG/ERROR only)

Acceptable logging:
- High-level events (e.g., "Generating role recommendations", "Cache hit")
- Non-sensitive metadata (e.g., "user_id=...", "count=3", "source=FALLBACK")
- Pipeline stage transitions and the reason a fallback was served
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from career_backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def truncate_for_log(text: Optional[str], limit: int = 500) -> str:
    """Shorten model output before it is written to a log line."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
