# topmark:header:start
#
#   project      : Tealeaf
#   file         : freshness.py
#   file_relpath : src/tealeaf/pages/freshness.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cache freshness checks.

Pure arithmetic over the cache root's modification time. The cache is *stale*
when it is strictly older than the configured interval; an automatic update is
only triggered when the cache is stale **and** auto-update is enabled. When
auto-update is disabled, staleness is only ever surfaced as a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

SECONDS_PER_HOUR: int = 3600


def is_stale(cache_mtime: float, now: float, interval_hours: int) -> bool:
    """Return True if the cache is older than ``interval_hours``.

    Args:
        cache_mtime (float): Cache root modification time (POSIX seconds).
        now (float): Current time (POSIX seconds).
        interval_hours (int): Maximum accepted age, in hours.

    Returns:
        bool: True iff ``now - cache_mtime > interval_hours * 3600``, compared in
            whole seconds.
    """
    return int(now) - int(cache_mtime) > interval_hours * SECONDS_PER_HOUR


def should_autoupdate(auto_update_enabled: bool, stale: bool) -> bool:
    """Return True if an automatic cache update should run."""
    return auto_update_enabled and stale


def cache_age(cache_mtime: float, now: float) -> timedelta:
    """Return the age of the cache (never negative)."""
    return timedelta(seconds=max(0, int(now) - int(cache_mtime)))


@dataclass(frozen=True, slots=True)
class Freshness:
    """Outcome of a freshness check.

    Attributes:
        stale (bool): The cache is older than the configured interval.
        autoupdate (bool): An automatic update should run now.
        age (timedelta): Age of the cache.
    """

    stale: bool
    autoupdate: bool
    age: timedelta

    @property
    def should_warn(self) -> bool:
        """Stale but not about to be refreshed: the user should be told."""
        return self.stale and not self.autoupdate


def check_freshness(
    cache_mtime: float,
    now: float,
    *,
    interval_hours: int,
    auto_update: bool,
) -> Freshness:
    """Bundle `is_stale`, `should_autoupdate` and `cache_age` into one value."""
    stale: bool = is_stale(cache_mtime, now, interval_hours)
    return Freshness(
        stale=stale,
        autoupdate=should_autoupdate(auto_update, stale),
        age=cache_age(cache_mtime, now),
    )
