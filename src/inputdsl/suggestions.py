"""Did-you-mean suggestions for misspelled field and enum value names."""

from __future__ import annotations

from collections.abc import Sequence

MAX_SUGGESTIONS = 5


def lexical_distance(a: str, b: str) -> int:
    """Compute the edit distance between two names.

    Counts insertions, deletions, substitutions and transpositions of two
    adjacent characters (optimal string alignment). Names that differ only
    in case are at distance 1, so they always rank right after an exact match.

    Args:
        a: First name.
        b: Second name.

    Returns:
        The minimum number of edits required to transform ``a`` into ``b``.

    """
    if a == b:
        return 0

    a, b = a.lower(), b.lower()
    if a == b:
        return 1

    # Three rolling rows are enough: transpositions look two rows back.
    before: list[int] = []
    prev_row = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        curr_row = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr_row[j] = min(
                prev_row[j] + 1,
                curr_row[j - 1] + 1,
                prev_row[j - 1] + cost,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                curr_row[j] = min(curr_row[j], before[j - 2] + cost)
        before, prev_row = prev_row, curr_row

    return prev_row[len(b)]


def suggestion_list(input_: str, options: Sequence[str]) -> list[str]:
    """Return the options close enough to input_ to be worth suggesting.

    An option qualifies when its distance is at most half the length of the
    longer of the two names (and never less than 1). Results are ordered by
    distance, then alphabetically.
    """
    input_threshold = len(input_) / 2
    distances: dict[str, int] = {}
    for option in options:
        distance = lexical_distance(input_, option)
        threshold = max(input_threshold, len(option) / 2, 1)
        if distance <= threshold:
            distances[option] = distance
    return sorted(distances, key=lambda option: (distances[option], option))


def did_you_mean(
    suggestions: Sequence[str],
    sub_message: str | None = None,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Render a suggestion suffix for an error message.

    Returns an empty string when there is nothing to suggest, otherwise a
    sentence starting with a space, e.g. ' Did you mean "name" or "names"?'.
    """
    if not suggestions:
        return ""

    message = " Did you mean "
    if sub_message:
        message += sub_message + " "

    quoted = [f'"{suggestion}"' for suggestion in suggestions[:max_suggestions]]
    if len(quoted) == 1:
        return message + quoted[0] + "?"
    if len(quoted) == 2:
        return message + quoted[0] + " or " + quoted[1] + "?"
    return message + ", ".join(quoted[:-1]) + ", or " + quoted[-1] + "?"
