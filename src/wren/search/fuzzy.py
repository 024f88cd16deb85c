"""Approximate substring matching.

Finds where a short pattern fits best inside a longer text, counting
insertions, deletions, substitutions and adjacent transpositions
(optimal string alignment). The pattern may start anywhere in the text
at no cost, so ``"pyhton"`` matches ``"learning python"`` with one error.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Alignment:
    """The best placement of a pattern inside a text."""

    errors: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def best_alignment(pattern: str, text: str) -> Alignment | None:
    """Return the lowest-error placement of *pattern* in *text*.

    Returns None for an empty pattern. On ties the earliest placement
    wins.
    """
    m = len(pattern)
    if m == 0:
        return None

    # Column j holds, for each pattern prefix length i, the error count of
    # the best alignment ending at text[j] and where that alignment starts.
    prev_d = list(range(m + 1))
    prev_s = [0] * (m + 1)
    prev2_d: list[int] = []
    prev2_s: list[int] = []
    best = Alignment(errors=m, start=0, end=0)

    for j in range(1, len(text) + 1):
        tc = text[j - 1]
        cur_d = [0] * (m + 1)
        cur_s = [j] * (m + 1)
        for i in range(1, m + 1):
            pc = pattern[i - 1]
            d = prev_d[i - 1] + (pc != tc)
            s = prev_s[i - 1]
            if prev_d[i] + 1 < d:
                d, s = prev_d[i] + 1, prev_s[i]
            if cur_d[i - 1] + 1 < d:
                d, s = cur_d[i - 1] + 1, cur_s[i - 1]
            if (
                i > 1
                and j > 1
                and pc == text[j - 2]
                and pattern[i - 2] == tc
                and prev2_d[i - 2] + 1 < d
            ):
                d, s = prev2_d[i - 2] + 1, prev2_s[i - 2]
            cur_d[i] = d
            cur_s[i] = s

        if cur_d[m] < best.errors:
            best = Alignment(errors=cur_d[m], start=cur_s[m], end=j)
            if best.errors == 0:
                break

        prev2_d, prev2_s = prev_d, prev_s
        prev_d, prev_s = cur_d, cur_s

    return best


def token_score(
    token: str,
    text: str,
    *,
    threshold: float,
    min_match_length: int,
) -> tuple[float, Alignment] | None:
    """Score *token* against *text*, or None if it does not match.

    The score is errors per pattern character: 0.0 is an exact
    occurrence, and anything above *threshold* is rejected. Matches
    spanning fewer than *min_match_length* characters are rejected too.
    """
    alignment = best_alignment(token, text)
    if alignment is None or alignment.length < min_match_length:
        return None
    score = alignment.errors / len(token)
    if score > threshold:
        return None
    return score, alignment
