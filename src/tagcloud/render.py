"""HTML rendering of a tag cloud."""

import html
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .ranking import WordCount, order_alphabetically

if TYPE_CHECKING:
    from .config import CloudConfig

# Font size bounds used by the default stylesheet (classes f11 .. f37)
FONT_MIN = 11
FONT_MAX = 37

DEFAULT_STYLESHEETS = [
    "https://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
    "styles.css",
]


@dataclass
class RenderTable:
    """Selected words in alphabetical order with their count range."""

    entries: list[WordCount] = field(default_factory=list)
    max_count: int = 0
    min_count: int = 0

    def __len__(self) -> int:
        return len(self.entries)


def build_table(top_words: Sequence[WordCount]) -> RenderTable:
    """Create a RenderTable from a top-K selection.

    Args:
        top_words: Selected entries in any order.

    Returns:
        RenderTable sorted by word. Counts are 0 when nothing was selected.
    """
    if not top_words:
        return RenderTable()
    counts = [entry.count for entry in top_words]
    return RenderTable(
        entries=order_alphabetically(top_words),
        max_count=max(counts),
        min_count=min(counts),
    )


def font_size(
    count: int,
    min_count: int,
    max_count: int,
    font_min: int = FONT_MIN,
    font_max: int = FONT_MAX,
) -> int:
    """Scale a count linearly onto the font size range.

    When every selected word has the same count the midpoint of the range
    is used.

    Args:
        count: Count of the word being sized.
        min_count: Smallest count among the selected words.
        max_count: Largest count among the selected words.
        font_min: Size for ``min_count``.
        font_max: Size for ``max_count``.

    Returns:
        Font size in ``[font_min, font_max]``.
    """
    if max_count == min_count:
        return (font_max + font_min) // 2
    scale = (count - min_count) / (max_count - min_count)
    return math.ceil(font_min + (font_max - font_min) * scale)


def render_html(table: RenderTable, source_name: str, config: "CloudConfig | None" = None) -> str:
    """Render the tag cloud document.

    Args:
        table: Words to show, already in display order.
        source_name: Name of the input shown in the title and heading.
        config: Font range and stylesheets; defaults when None.

    Returns:
        Complete HTML document, newline terminated.
    """
    font_min = config.font_min if config else FONT_MIN
    font_max = config.font_max if config else FONT_MAX
    stylesheets = config.stylesheets if config else DEFAULT_STYLESHEETS

    heading = f"Top {len(table)} words in {html.escape(source_name)}"
    lines = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
    ]
    for href in stylesheets:
        lines.append(f'<link href="{html.escape(href)}" rel="stylesheet" type="text/css">')
    lines.extend([
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ])

    for entry in table.entries:
        size = font_size(entry.count, table.min_count, table.max_count, font_min, font_max)
        lines.append(
            f'<span style="cursor:default" class="f{size}" title="count: {entry.count}">'
            f"{html.escape(entry.word)}</span>"
        )

    lines.extend([
        "</p>",
        "</div>",
        "</body>",
        "</html>",
    ])
    return "\n".join(lines) + "\n"


def write_html(path: Path, document: str) -> None:
    """Write a rendered document to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(document)
