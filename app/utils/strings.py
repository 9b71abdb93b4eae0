"""Edit-distance helpers used for near-miss keyword suggestions."""


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning ``a`` into ``b``.

    Substitution, insertion and deletion each cost 1.
    """

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current

    return previous[len(b)]


def is_adjacent_transposition(a: str, b: str) -> bool:
    """True when swapping one pair of neighbouring characters turns ``a`` into ``b``."""

    if len(a) != len(b) or a == b:
        return False
    diffs = [i for i, (char_a, char_b) in enumerate(zip(a, b)) if char_a != char_b]
    return (
        len(diffs) == 2
        and diffs[1] == diffs[0] + 1
        and a[diffs[0]] == b[diffs[1]]
        and a[diffs[1]] == b[diffs[0]]
    )


def is_near_match(a: str, b: str) -> bool:
    """One edit away, counting a swapped pair of letters (FORM/FROM) as a single typo."""

    return levenshtein_distance(a, b) <= 1 or is_adjacent_transposition(a, b)
