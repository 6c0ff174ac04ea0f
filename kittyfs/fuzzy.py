"""Name matching for the list filter.

A query matches a name when its characters appear in order, ignoring case.
Prefix hits rank first, then substring hits, then scattered matches.
"""

from __future__ import annotations

from collections.abc import Sequence

PREFIX_RANK = 1000
SUBSTRING_RANK = 500
WORD_START_BONUS = 50
NAME_SEPARATORS = frozenset("/\\_-. ")


def _subsequence_positions(needle: str, haystack: str) -> list[int] | None:
    positions: list[int] = []
    start = 0
    for ch in needle:
        found = haystack.find(ch, start)
        if found < 0:
            return None
        positions.append(found)
        start = found + 1
    return positions


def match_score(query: str, name: str) -> int | None:
    """Return a rank for ``name`` (higher is better), or ``None`` on no match.

    Shorter names win among otherwise equal matches.
    """
    if not query:
        return 0
    needle = query.casefold()
    haystack = name.casefold()
    if haystack.startswith(needle):
        return PREFIX_RANK - len(haystack)

    found = haystack.find(needle)
    if found > 0:
        bonus = WORD_START_BONUS if haystack[found - 1] in NAME_SEPARATORS else 0
        return SUBSTRING_RANK + bonus - found - len(haystack)

    positions = _subsequence_positions(needle, haystack)
    if positions is None:
        return None
    return -(positions[-1] - positions[0]) - len(haystack)


def rank_labels(query: str, labels: Sequence[str]) -> list[int]:
    """Return indexes of ``labels`` matching ``query``, best first.

    Equal ranks keep label order; an empty query keeps every label.
    """
    if not query:
        return list(range(len(labels)))
    ranked: list[tuple[int, int]] = []
    for idx, label in enumerate(labels):
        score = match_score(query, label)
        if score is not None:
            ranked.append((score, idx))
    ranked.sort(key=lambda pair: -pair[0])
    return [idx for _, idx in ranked]


__all__ = ["match_score", "rank_labels"]
