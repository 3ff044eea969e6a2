"""Split lines of text into runs of word and separator characters."""

from collections.abc import Iterator

# Characters that never participate in a word
DEFAULT_SEPARATORS = " \t,.-:;/\"!?_@#$%&*[]()"


def next_word_or_separator(text: str, start: int, separators: str = DEFAULT_SEPARATORS) -> str:
    """Return the run of characters beginning at ``start``.

    The run is the longest stretch that is either entirely separator
    characters or entirely non-separator characters.

    Args:
        text: One line of input.
        start: Index of the first character of the run.
        separators: Characters that delimit words.

    Returns:
        Non-empty substring of ``text`` starting at ``start``.

    Raises:
        IndexError: If ``start`` is not a valid index into ``text``.
    """
    if not 0 <= start < len(text):
        raise IndexError(f"start index {start} out of range for line of length {len(text)}")

    in_separator = text[start] in separators
    end = start + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[start:end]


def is_separator(token: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    """Check if a token returned by the tokenizer is a separator run."""
    return bool(token) and token[0] in separators


def tokenize(line: str, separators: str = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield every word and separator run of a line, in order."""
    index = 0
    while index < len(line):
        token = next_word_or_separator(line, index, separators)
        yield token
        index += len(token)


def words(line: str, separators: str = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield the word tokens of a line, lowercased."""
    for token in tokenize(line, separators):
        if not is_separator(token, separators):
            yield token.lower()
