"""Unix clock implementation.

This module provides the wall clock used for token timestamps and TTL checks.
"""

from datetime import datetime, timezone

from branca.interfaces.encoding import IClock


class UnixClock(IClock):
    """Clock that reports whole seconds since the Unix epoch in UTC."""

    def now(self) -> int:
        """Get the current Unix time.

        Returns:
            The current time in whole seconds, truncated.
        """
        return int(datetime.now(timezone.utc).timestamp())
