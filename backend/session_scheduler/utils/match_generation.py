"""
Round robin match generation helpers

Single round robin: every unordered pair of teams plays exactly once.
Rest breaks fall after every 2nd match, never after the final match.
"""

from typing import Dict, List, Tuple


def team_label(number: int) -> str:
    """Synthesized team identifier: "Team <n>" (1-based)"""
    if number < 1:
        raise ValueError(f"team number must be >= 1, got {number}")
    return f"Team {number}"


def round_robin_match_count(n: int) -> int:
    """Round robin match count: n * (n-1) / 2 (0 for fewer than 2 teams)"""
    if n < 2:
        return 0
    return (n * (n - 1)) // 2


def rest_break_budget(total_matches: int) -> int:
    """
    Number of rest breaks charged against the session: floor(M / 2).

    Includes the break after the final pair even though that one is never
    placed on the timeline.
    """
    return total_matches // 2


def rest_break_follows(matches_emitted: int, total_matches: int) -> bool:
    """
    True when a rest break comes right after the match that brought the
    emitted count to matches_emitted.

    Rule: matches_emitted is even AND more matches remain.
    """
    return matches_emitted % 2 == 0 and matches_emitted < total_matches


def round_robin_pairs(n: int) -> List[Tuple[int, int]]:
    """
    All (i, j) team number pairs with i < j, in lexicographic order.

    For n=4: (1,2), (1,3), (1,4), (2,3), (2,4), (3,4)
    """
    pairs: List[Tuple[int, int]] = []
    for i in range(1, n):
        for j in range(i + 1, n + 1):
            pairs.append((i, j))
    return pairs


def count_appearances(pairs: List[Tuple[str, str]]) -> Dict[str, int]:
    """Tally how many times each team appears across (team_a, team_b) pairs."""
    counts: Dict[str, int] = {}
    for team_a, team_b in pairs:
        counts[team_a] = counts.get(team_a, 0) + 1
        counts[team_b] = counts.get(team_b, 0) + 1
    return counts
