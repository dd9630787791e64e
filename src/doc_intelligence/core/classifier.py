"""Yes/no questions about a tokenized markdown document."""

from __future__ import annotations

from typing import Sequence

from .models import MarkdownToken, TokenType


def has_section(tokens: Sequence[MarkdownToken], section_name: str) -> bool:
    """True if any heading contains ``section_name``, ignoring case."""
    needle = section_name.lower()
    return any(
        token.type == TokenType.HEADING and needle in token.text.lower()
        for token in tokens
    )


def has_code_examples(tokens: Sequence[MarkdownToken]) -> bool:
    return any(token.type == TokenType.CODE_BLOCK for token in tokens)
