"""
Textual layout tokens.

The renderer never hard-codes markup; it asks a token set for headings,
emphasis, list items, table separators and links. MARKDOWN_TOKENS is the
default, PLAIN_TEXT_TOKENS shows how an alternate style is substituted.
"""

from __future__ import annotations

from typing import Callable, Dict

from pydantic import BaseModel, ConfigDict

from transform_report.data.schema import LogLevel


class MarkdownTokens(BaseModel):
    """
    Markup used by the report renderer.

    Notes:
    - heading: marker repeated once per heading level (e.g. "#" -> "###")
    - table_header_column: filler for the header/body separator row
    - link: format string with {title} and {url}
    """

    model_config = ConfigDict(frozen=True)

    heading: str = "#"
    unordered_list_item: str = "-"
    italic: str = "_"
    bold: str = "**"
    table_header_column: str = "-------------"
    table_column_separator: str = "|"
    link: str = "[{title}]({url})"

    def make_heading(self, level: int, text: str) -> str:
        marker = self.heading * level
        return f"{marker} {text}" if marker else text

    def make_bold(self, text: str) -> str:
        return f"{self.bold}{text}{self.bold}" if text else text

    def make_italic(self, text: str) -> str:
        return f"{self.italic}{text}{self.italic}" if text else text

    def make_link(self, title: str, url: str) -> str:
        return self.link.format(title=title, url=url)

    def make_list_item(self, text: str) -> str:
        return f"{self.unordered_list_item} {text}"

    def make_cell(self, text: str) -> str:
        """Single-line cell text with the column separator escaped."""
        flat = " ".join((text or "").split())
        if self.table_column_separator:
            flat = flat.replace(self.table_column_separator, f"\\{self.table_column_separator}")
        return flat

    def make_row(self, *cells: str) -> str:
        return f" {self.table_column_separator} ".join(self.make_cell(c) for c in cells)

    def make_header_separator(self, columns: int) -> str:
        return self.make_row(*([self.table_header_column] * columns))


MARKDOWN_TOKENS = MarkdownTokens()

PLAIN_TEXT_TOKENS = MarkdownTokens(
    heading="",
    unordered_list_item="*",
    italic="",
    bold="",
    table_header_column="-----",
    link="{title} <{url}>",
)


EmphasisStrategy = Callable[[MarkdownTokens, str], str]

LEVEL_EMPHASIS: Dict[LogLevel, EmphasisStrategy] = {
    LogLevel.DEBUG: MarkdownTokens.make_italic,
    LogLevel.INFO: lambda tokens, text: text,
    LogLevel.WARNING: MarkdownTokens.make_bold,
}


def emphasize(tokens: MarkdownTokens, level: LogLevel, text: str) -> str:
    """Apply the emphasis configured for a level; unknown levels stay plain."""
    strategy = LEVEL_EMPHASIS.get(level)
    if strategy is None:
        return text
    return strategy(tokens, text)
