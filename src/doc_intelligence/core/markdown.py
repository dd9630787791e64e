"""Markdown tokenizer built on mistune v3.

mistune's AST renderer yields nested dicts. Only top-level blocks are kept: a
list or block quote is a single ``OTHER`` token, so headings and code nested
inside it are not seen by the classifier.
"""

from __future__ import annotations

import mistune

from .models import MarkdownToken, TokenType


def _inline_text(node: dict) -> str:
    """Concatenate the raw text of an inline subtree."""
    if "raw" in node:
        return node["raw"]
    return "".join(_inline_text(child) for child in node.get("children", []))


def _top_level(nodes: list[dict]) -> list[MarkdownToken]:
    tokens = []
    for node in nodes:
        node_type = node.get("type")
        if node_type == "heading":
            tokens.append(MarkdownToken(
                type=TokenType.HEADING,
                text=_inline_text(node).strip(),
                level=node.get("attrs", {}).get("level"),
            ))
        elif node_type == "block_code":
            tokens.append(MarkdownToken(type=TokenType.CODE_BLOCK, text=node.get("raw", "")))
        elif node_type != "blank_line":
            tokens.append(MarkdownToken(type=TokenType.OTHER))
    return tokens


def parse_markdown(text: str) -> list[MarkdownToken]:
    """Parse markdown text into a flat sequence of typed tokens.

    Headings (ATX and setext) carry their plain inline text and level; fenced
    and indented code blocks become ``CODE_BLOCK`` tokens when they appear
    at the top level of the document. Everything else, including lists and
    block quotes, is ``OTHER``.
    """
    parser = mistune.create_markdown(renderer="ast")
    return _top_level(parser(text))
