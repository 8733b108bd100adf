"""Bucketing of articles by time elapsed since publication.

A bucket covers ``interval`` units and includes its upper boundary: with
``interval=12`` and hours, an article 1h or exactly 12h old is in
"12 hours ago", one 12.5h or 13h old is in "24 hours ago". Articles dated in
the future are treated as published now.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from newsfeed.data import Article, Bucket, TimeUnit

UNIT_LENGTHS: dict[TimeUnit, timedelta] = {
    TimeUnit.MINUTES: timedelta(minutes=1),
    TimeUnit.HOURS: timedelta(hours=1),
    TimeUnit.DAYS: timedelta(days=1),
    TimeUnit.WEEKS: timedelta(weeks=1),
    TimeUnit.MONTHS: timedelta(days=30),
    TimeUnit.YEARS: timedelta(days=365),
}


def bucket_index(elapsed: timedelta, span: timedelta) -> int:
    """Zero-based bucket for an elapsed duration, upper boundary inclusive."""
    if elapsed <= timedelta(0):
        return 0
    # ceil(elapsed / span) - 1, in exact integer arithmetic
    return -((-elapsed) // span) - 1


def bucket_label(index: int, interval: int, unit: TimeUnit) -> str:
    return f"{(index + 1) * interval} {unit} ago"


def group_articles(
    articles: Iterable[Article],
    interval: int,
    unit: TimeUnit | str,
    *,
    now: datetime | None = None,
) -> dict[str, Bucket]:
    """Group articles into fixed-width elapsed-time buckets.

    Args:
        articles: Articles to group.
        interval: Bucket width, in ``unit``s. Must be positive.
        unit: Time unit of the interval.
        now: Reference instant (defaults to the current UTC time).

    Returns:
        Mapping of bucket label to Bucket, most recent bucket first.

    Raises:
        ValueError: If interval is not positive or unit is unknown.
    """
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise ValueError(f"interval must be a positive integer, got {interval!r}")
    unit = TimeUnit(unit)
    span = UNIT_LENGTHS[unit] * interval
    if now is None:
        now = datetime.now(tz=UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    members: dict[int, list[Article]] = {}
    for article in articles:
        index = bucket_index(now - article.published_datetime, span)
        members.setdefault(index, []).append(article)

    return {
        bucket_label(index, interval, unit): Bucket(
            label=bucket_label(index, interval, unit),
            articles=tuple(members[index]),
        )
        for index in sorted(members)
    }
