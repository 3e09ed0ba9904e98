"""Calendar conversion for decoded snowflakes.

Kept apart from the decoder so the core never imports date handling.
"""

from __future__ import annotations

from datetime import datetime, timezone

from dflake.models import Dflake


def to_datetime(flake: Dflake) -> datetime:
    """Return the snowflake timestamp as a timezone-aware UTC datetime.

    Milliseconds are truncated to whole seconds.
    """
    seconds = flake.timestamp // 1000
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
