"""String dynamic programmes: edit distance, common subsequences and substrings, supersequences."""

from __future__ import annotations

MOD = 10**9 + 7


def edit_distance(s: str, t: str) -> int:
    """Return the fewest insertions, deletions and replacements turning s into t."""
    prev = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        curr = [i]
        for j, b in enumerate(t, start=1):
            if a == b:
                curr.append(prev[j - 1])
            else:
                curr.append(1 + min(curr[j - 1], prev[j - 1], prev[j]))
        prev = curr
    return prev[-1]


def _lcs_table(s: str, t: str) -> list[list[int]]:
    table = [[0] * (len(t) + 1)]
    for a in s:
        prev = table[-1]
        curr = [0]
        for j, b in enumerate(t, start=1):
            if a == b:
                curr.append(1 + prev[j - 1])
            else:
                curr.append(max(prev[j], curr[j - 1]))
        table.append(curr)
    return table


def lcs_length(s: str, t: str) -> int:
    """Return the length of the longest common subsequence of s and t."""
    prev = [0] * (len(t) + 1)
    for a in s:
        curr = [0]
        for j, b in enumerate(t, start=1):
            if a == b:
                curr.append(1 + prev[j - 1])
            else:
                curr.append(max(prev[j], curr[j - 1]))
        prev = curr
    return prev[-1]


def longest_common_substring(s: str, t: str) -> int:
    """Return the length of the longest common contiguous substring of s and t."""
    best = 0
    prev = [0] * (len(t) + 1)
    for a in s:
        curr = [0]
        for j, b in enumerate(t, start=1):
            run = prev[j - 1] + 1 if a == b else 0
            curr.append(run)
            best = max(best, run)
        prev = curr
    return best


def longest_palindrome_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return lcs_length(s, s[::-1])


def min_insertions_deletions(s: str, t: str) -> int:
    """Return the fewest single-character insertions and deletions turning s into t."""
    return len(s) + len(t) - 2 * lcs_length(s, t)


def shortest_supersequence(s: str, t: str) -> str:
    """Return a shortest string holding both s and t as subsequences."""
    table = _lcs_table(s, t)
    i, j = len(s), len(t)
    pieces: list[str] = []
    while i > 0 and j > 0:
        if s[i - 1] == t[j - 1]:
            pieces.append(s[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            pieces.append(s[i - 1])
            i -= 1
        else:
            pieces.append(t[j - 1])
            j -= 1
    pieces.extend(reversed(s[:i]))
    pieces.extend(reversed(t[:j]))
    return "".join(reversed(pieces))


def count_distinct_subsequences(text: str, pattern: str) -> int:
    """Count the ways pattern occurs as a subsequence of text, modulo 10**9 + 7."""
    prev = [1] + [0] * len(pattern)
    for a in text:
        curr = [1]
        for j, b in enumerate(pattern, start=1):
            if a == b:
                curr.append((prev[j - 1] + prev[j]) % MOD)
            else:
                curr.append(prev[j])
        prev = curr
    return prev[-1]