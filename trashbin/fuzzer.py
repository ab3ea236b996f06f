"""Approximate substring search with the fuzzy bitap algorithm."""

from __future__ import annotations

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1
_MAX_PATTERN_LENGTH = 31


def get_fuzzy_score(text: str, pattern: str, max_distance: int) -> int:
    """Find where ``pattern`` approximately occurs in ``text``.

    Only substitutions are counted, up to ``max_distance`` of them.
    Returns the start index of the first match, 0 for an empty pattern,
    and -1 when nothing matches or the pattern is longer than 31 characters.
    """
    if text is None or pattern is None:
        raise TypeError("text and pattern must be strings")
    if max_distance < 0:
        raise ValueError("max_distance must not be negative")

    if pattern == "":
        return 0
    pattern_length = len(pattern)
    if pattern_length > _MAX_PATTERN_LENGTH:
        return -1

    masks: dict[str, int] = {}
    for position, char in enumerate(pattern):
        masks[char] = masks.get(char, _WORD_MASK) & ~(1 << position) & _WORD_MASK

    states = [_WORD_MASK & ~1] * (max_distance + 1)
    match_bit = 1 << pattern_length

    for index, char in enumerate(text):
        char_mask = masks.get(char, _WORD_MASK)
        previous = states[0]
        states[0] = ((states[0] | char_mask) << 1) & _WORD_MASK
        for distance in range(1, max_distance + 1):
            current = states[distance]
            states[distance] = ((previous & (current | char_mask)) << 1) & _WORD_MASK
            previous = current
        if not states[max_distance] & match_bit:
            return index - pattern_length + 1

    return -1