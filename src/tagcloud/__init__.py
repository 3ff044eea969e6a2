"""Generate HTML tag clouds from word frequencies in text."""

from .cli import main
from .config import CloudConfig, parse_key_value_args
from .counter import CountResult, count_file, count_words
from .pipeline import build_cloud, generate_cloud
from .ranking import WordCount, by_count, by_word, order_alphabetically, select_top, take_first
from .render import FONT_MAX, FONT_MIN, RenderTable, build_table, font_size, render_html, write_html
from .sources import SOURCE_CACHE_DIR_NAME, FetchedText, cached_copy_path, fetch_text, is_url
from .tokenizer import DEFAULT_SEPARATORS, is_separator, next_word_or_separator, tokenize, words

__all__ = [
    "CloudConfig",
    "parse_key_value_args",
    "CountResult",
    "count_file",
    "count_words",
    "build_cloud",
    "generate_cloud",
    "WordCount",
    "by_count",
    "by_word",
    "order_alphabetically",
    "select_top",
    "take_first",
    "FONT_MAX",
    "FONT_MIN",
    "RenderTable",
    "build_table",
    "font_size",
    "render_html",
    "write_html",
    "DEFAULT_SEPARATORS",
    "is_separator",
    "next_word_or_separator",
    "tokenize",
    "words",
    "main",
    "SOURCE_CACHE_DIR_NAME",
    "FetchedText",
    "cached_copy_path",
    "fetch_text",
    "is_url",
]
