"""Count, select and render in one pass."""

from collections.abc import Iterable

from .config import CloudConfig
from .counter import CountResult, count_words
from .ranking import select_top
from .render import RenderTable, build_table, render_html


def build_cloud(counts: CountResult, n: int) -> RenderTable:
    """Select the ``n`` most frequent words and order them for display."""
    return build_table(select_top(counts.counts, n))


def generate_cloud(
    lines: Iterable[str],
    n: int,
    source_name: str,
    config: CloudConfig | None = None,
) -> str:
    """Produce the tag cloud document for some text.

    Args:
        lines: Input text, line by line.
        n: Number of words to show.
        source_name: Name shown in the document title.
        config: Settings; defaults when None.

    Returns:
        HTML document.
    """
    config = config or CloudConfig()
    counts = count_words(lines, config.separators)
    return render_html(build_cloud(counts, n), source_name, config)
