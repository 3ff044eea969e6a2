"""Word frequency counting."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .tokenizer import DEFAULT_SEPARATORS, words


@dataclass
class CountResult:
    """Word counts accumulated from one input."""

    counts: dict[str, int] = field(default_factory=dict)
    total_words: int = 0
    error: str | None = None

    @property
    def unique_words(self) -> int:
        return len(self.counts)

    def add(self, word: str) -> None:
        """Record one occurrence of an already lowercased word."""
        self.counts[word] = self.counts.get(word, 0) + 1
        self.total_words += 1


def count_words(lines: Iterable[str], separators: str = DEFAULT_SEPARATORS) -> CountResult:
    """Count lowercase word occurrences across all lines.

    Args:
        lines: Lines of text; trailing newlines are ignored.
        separators: Characters that delimit words.

    Returns:
        CountResult with one entry per distinct lowercase word.
    """
    result = CountResult()
    _count_into(result, lines, separators)
    return result


def count_file(path: Path, separators: str = DEFAULT_SEPARATORS) -> CountResult:
    """Count words in a UTF-8 text file.

    Lines are decoded one at a time. A failure while reading, including a
    line that is not valid UTF-8, stops counting; the words of every
    earlier line are kept and the failure is described in
    ``CountResult.error``.

    Args:
        path: Text file to read.
        separators: Characters that delimit words.

    Returns:
        CountResult for the file.

    Raises:
        OSError: If the file cannot be opened.
    """
    result = CountResult()
    with open(path, "rb") as f:
        try:
            _count_into(result, _decode_lines(f), separators)
        except (OSError, UnicodeDecodeError) as e:
            result.error = f"error reading {path}: {e}"
    return result


def _decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as e:
            e.reason = f"{e.reason} on line {number}"
            raise


def _count_into(result: CountResult, lines: Iterable[str], separators: str) -> None:
    for line in lines:
        for word in words(line.rstrip("\r\n"), separators):
            result.add(word)
