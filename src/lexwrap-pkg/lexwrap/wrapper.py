"""Greedy word wrapping of a single paragraph."""

from bisect import bisect_right


def clamp(value: int, low: int, high: int) -> int:
    return low if value < low else high if value > high else value


def wrap(text: str, first_limit: int, limit: int) -> list[str]:
    """Split ``text`` into chunks that each fit their limit, breaking at spaces.

    The first chunk gets ``first_limit`` columns and every later chunk gets
    ``limit``. Each chunk extends to the furthest space that still fits. A word
    that alone exceeds the limit is kept whole on its own chunk rather than cut.
    Empty text yields a single empty chunk so blank paragraphs survive.

    >>> wrap("alpha beta gamma delta", 20, 20)
    ['alpha beta gamma', 'delta']
    """
    first_limit = max(0, first_limit)
    limit = max(0, limit)

    # Every space is a candidate split; the end of the text always is one.
    boundaries = [i for i, ch in enumerate(text) if ch == " "]
    boundaries.append(len(text))

    chunks = []
    start = 0
    consumed = 0  # boundaries[:consumed] have been used and are never reused
    while start < len(text):
        width = first_limit if not chunks else limit

        # Furthest unconsumed boundary that still fits.
        found = bisect_right(boundaries, start + width, lo=consumed) - 1
        if found < consumed:
            # The next word alone overflows; end the chunk where the word ends.
            found = consumed
        split = clamp(boundaries[found], start, len(text))

        chunks.append(text[start:split])
        start = split
        consumed = found + 1
        if split < len(text):
            start += 1  # step over the space

    return chunks or [""]
