"""Quoting of parent replies.

A reply to another reply opens with an excerpt of the reply it answers:

    @author:
    > excerpt

    new text

Only the answered reply's own words are quoted, so a quote never contains
another quote.
"""

import re

QUOTE_ATTRIBUTION = re.compile(r"^@[^\n]*:$")
QUOTE_MARKER = re.compile(r"^(?:>\s?)+")
UNKNOWN_AUTHOR = "Unknown"
ELLIPSIS = "..."


def _opens_quote_block(lines: list[str], index: int) -> bool:
    return (
        index + 1 < len(lines)
        and QUOTE_ATTRIBUTION.match(lines[index].strip()) is not None
        and lines[index + 1].startswith(">")
    )


def strip_quote(content: str) -> str:
    """Remove quote blocks from reply content.

    A quote block is an ``@name:`` line followed directly by one or more
    lines starting with ``>``. Every block is dropped together with the
    blank lines after it; the remaining text is returned stripped.
    """
    lines = content.split("\n")
    kept = []
    index = 0
    while index < len(lines):
        if not _opens_quote_block(lines, index):
            kept.append(lines[index])
            index += 1
            continue

        index += 1
        while index < len(lines) and lines[index].startswith(">"):
            index += 1
        while index < len(lines) and not lines[index].strip():
            index += 1

    return "\n".join(kept).strip()


def truncate(text: str, max_length: int) -> str:
    """Cut text to ``max_length`` characters and mark the cut with ``...``."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def compose_quoted_reply(
    content: str,
    quoted_content: str,
    quoted_author: str | None,
    max_length: int = 100,
) -> str:
    """Prefix new reply content with a quote of the reply it answers.

    Args:
        content: Text of the new reply
        quoted_content: Full content of the reply being answered
        quoted_author: Username of the answered reply's author, if known
        max_length: Maximum number of quoted characters

    Returns:
        Reply content with the quote block prepended
    """
    excerpt = truncate(strip_quote(quoted_content), max_length)
    quoted_lines = "\n".join(
        f"> {QUOTE_MARKER.sub('', line)}" for line in excerpt.split("\n")
    )
    author = quoted_author or UNKNOWN_AUTHOR
    return f"@{author}:\n{quoted_lines}\n\n{content}"
