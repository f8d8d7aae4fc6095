"""Edit-distance matching for near-miss usernames."""

from collections.abc import Iterable


def distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Counts the single-character insertions, deletions and substitutions
    needed to turn ``a`` into ``b``.

    Examples:
        distance("adel", "adele") -> 1
        distance("justinbeiber", "justinbieber") -> 2
    """
    # Keep the shorter string on the inner loop
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a):
        current = [i + 1]
        for j, char_b in enumerate(b):
            insertion = previous[j + 1] + 1
            deletion = current[j] + 1
            substitution = previous[j] + (char_a != char_b)
            current.append(min(insertion, deletion, substitution))
        previous = current
    return previous[-1]


def find_close_matches(query: str, candidates: Iterable[str], max_distance: int) -> list[str]:
    """
    Candidates within ``max_distance`` edits of ``query``.

    Order follows ``candidates``; callers that want a single substitute take
    the first element.
    """
    return [candidate for candidate in candidates if distance(query, candidate) <= max_distance]
