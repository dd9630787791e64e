"""README quality scoring and suggestion engine.

The heuristic is policy data, not an algorithm: each check is worth a fixed
number of points. Add a row to ``README_CHECKS`` to add a check. Component
weights for the overall score live with ``DocumentationReport`` in models.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional, Sequence

from .classifier import has_code_examples, has_section
from .models import MarkdownToken

logger = logging.getLogger(__name__)


class ReadmeCheck(NamedTuple):
    """One all-or-nothing README check."""

    name: str
    test: Callable[[Sequence[MarkdownToken]], bool]
    points: int
    suggestion: Optional[str]


def _section(name: str) -> Callable[[Sequence[MarkdownToken]], bool]:
    return lambda tokens: has_section(tokens, name)


# Suggestions are emitted in table order. Contributing scores but does not suggest.
README_CHECKS: list[ReadmeCheck] = [
    ReadmeCheck("description", _section("description"), 20, "Add a project description section"),
    ReadmeCheck("installation", _section("installation"), 20, "Add installation instructions"),
    ReadmeCheck("usage", _section("usage"), 20, "Add usage examples"),
    ReadmeCheck("contributing", _section("contributing"), 20, None),
    ReadmeCheck("code_examples", has_code_examples, 20, "Include code examples"),
]

# README quality below this is flagged by the suggest action.
QUALITY_THRESHOLD = 60


def score_readme(tokens: Sequence[MarkdownToken]) -> int:
    """Score a tokenized README from 0 to 100.

    Every check in ``README_CHECKS`` is independent, so the result does not
    depend on token or check order, and adding a qualifying heading or code
    block never lowers it.
    """
    score = sum(check.points for check in README_CHECKS if check.test(tokens))
    return max(0, min(100, score))


def readme_suggestions(tokens: Sequence[MarkdownToken]) -> list[str]:
    """Advice for every failed README check, in check order."""
    return [
        check.suggestion
        for check in README_CHECKS
        if check.suggestion is not None and not check.test(tokens)
    ]

