from __future__ import annotations

from collections import Counter
from datetime import date, timedelta


def average_rating(mood_logs):
    ratings = [int(log.rating) for log in mood_logs or []]
    if not ratings:
        return None
    return round(sum(ratings) / len(ratings), 1)


def top_tags(mood_logs, limit=3):
    counter = Counter()
    for log in mood_logs or []:
        counter.update(tag for tag in log.tags if tag)
    return [tag for tag, _ in counter.most_common(limit)]


def logging_streak(mood_logs, today=None):
    """Consecutive days, ending today or yesterday, with at least one mood log."""
    if not mood_logs:
        return 0
    days = set()
    for log in mood_logs:
        created = log.created_at
        days.add(created.astimezone().date() if created.tzinfo else created.date())
    current = today or date.today()
    if current not in days:
        current -= timedelta(days=1)
    count = 0
    while current in days:
        count += 1
        current -= timedelta(days=1)
    return count


def mood_summary(mood_logs, today=None):
    return {
        "entries": len(mood_logs or []),
        "average_rating": average_rating(mood_logs),
        "top_tags": top_tags(mood_logs),
        "streak_days": logging_streak(mood_logs, today=today),
    }
