"""Selection and ordering of counted words."""

import heapq
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple


class WordCount(NamedTuple):
    """A word and the number of times it occurred."""

    word: str
    count: int


def by_count(entry: WordCount) -> tuple[int, str]:
    """Order by descending count, then ascending word."""
    return (-entry.count, entry.word)


def by_word(entry: WordCount) -> str:
    """Order by ascending word."""
    return entry.word


def take_first(
    entries: Iterable[WordCount], n: int, order: Callable[[WordCount], Any]
) -> list[WordCount]:
    """Return the first ``n`` entries under ``order``, in that order.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of words cannot be negative: {n}")
    return heapq.nsmallest(n, entries, key=order)


def select_top(counts: Mapping[str, int], n: int) -> list[WordCount]:
    """Select the ``n`` most frequent words.

    Ties on count go to the lexicographically smaller word. Fewer than
    ``n`` entries are returned when there are fewer distinct words.

    Args:
        counts: Mapping of word to occurrence count.
        n: Number of words wanted (>= 0).

    Returns:
        Up to ``n`` entries, most frequent first.
    """
    entries = (WordCount(word, count) for word, count in counts.items())
    return take_first(entries, n, by_count)


def order_alphabetically(entries: Iterable[WordCount]) -> list[WordCount]:
    """Sort entries by word."""
    return sorted(entries, key=by_word)
