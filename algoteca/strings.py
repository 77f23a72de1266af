"""String algorithms: edit distance, KMP, Rabin-Karp and suffix arrays."""

_RADIX = 256
_PRIME = 101


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between a and b."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def prefix_function(pattern: str) -> list[int]:
    """Return, for each position, the length of the longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start index of every occurrence of pattern in text, by Knuth-Morris-Pratt."""
    _require_pattern(pattern)
    lps = prefix_function(pattern)
    m, n = len(pattern), len(text)
    found: list[int] = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1
    return found


def rabin_karp(pattern: str, text: str) -> list[int]:
    """Return the start index of every occurrence of pattern in text, by rolling hash."""
    _require_pattern(pattern)
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(_RADIX, m - 1, _PRIME)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (_RADIX * pattern_hash + ord(p_char)) % _PRIME
        window_hash = (_RADIX * window_hash + ord(t_char)) % _PRIME
    found: list[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            found.append(i)
        if i < n - m:
            window_hash = (
                _RADIX * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % _PRIME
    return found


def suffix_array(text: str) -> list[int]:
    """Return the start indices of the suffixes of text in lexicographic order."""
    return sorted(range(len(text)), key=lambda start: text[start:])