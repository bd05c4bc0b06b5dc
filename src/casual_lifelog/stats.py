"""
Cumulative stat totals for a snippet log.
"""

from typing import Iterable

from casual_lifelog.models import BASELINE_STATS, STAT_KEYS, Snippet, StatBlock


def aggregate_stats(snippets: Iterable[Snippet], baseline: StatBlock = BASELINE_STATS) -> StatBlock:
    """
    Sum every snippet's stat changes onto the baseline.

    Order does not matter and nothing is clamped; totals can go negative or
    grow without bound.

    Args:
        snippets: The snippet log (any order)
        baseline: Starting totals (default: 10 on every stat)

    Returns:
        The cumulative totals

    Examples:
        >>> aggregate_stats([]).as_dict()
        {'body': 10, 'intelligence': 10, 'reflexes': 10, 'technical': 10, 'cool': 10}
    """
    totals = baseline.as_dict()
    for snippet in snippets:
        for key in STAT_KEYS:
            totals[key] += getattr(snippet.stat_changes, key) or 0
    return StatBlock(**totals)
