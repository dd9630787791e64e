"""Pydantic data models: the shared business objects.

The scoring engine, analyzer, search adapter and the FastMCP server all
exchange these models. Everything here is immutable once built.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


# Weight of each documentation component in the overall score.
COMPONENT_WEIGHTS: dict[str, float] = {
    "readme": 0.6,
}


def compute_overall_score(component_scores: dict[str, float]) -> float:
    """Weighted mean of the present component scores.

    Components without a weight in ``COMPONENT_WEIGHTS`` are ignored. Returns
    0 when no weighted component is present.
    """
    weighted_sum = 0.0
    weight_total = 0.0
    for name, quality in component_scores.items():
        weight = COMPONENT_WEIGHTS.get(name)
        if weight is None:
            continue
        weighted_sum += quality * weight
        weight_total += weight

    if weight_total <= 0:
        return 0.0
    return round(weighted_sum / weight_total, 2)


class Action(str, Enum):
    """Actions accepted by the documentation tool."""

    ANALYZE = "analyze"
    SUGGEST = "suggest"
    SEARCH = "search"


class TokenType(str, Enum):
    """Markdown token kinds the classifier cares about."""

    HEADING = "heading"
    CODE_BLOCK = "code_block"
    OTHER = "other"


class Severity(str, Enum):
    """Documentation issue severity."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MarkdownToken(BaseModel):
    """A single block-level token from the markdown parser."""

    model_config = ConfigDict(frozen=True)

    type: TokenType
    text: str = ""
    level: Optional[int] = None


class ContentEntry(BaseModel):
    """One entry of a GitHub contents listing (file, dir, symlink or submodule)."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    type: str = "file"
    sha: Optional[str] = None
    size: int = 0
    content: Optional[str] = None
    encoding: Optional[str] = None
    html_url: Optional[str] = None


class ReadmeAnalysis(BaseModel):
    """Quality assessment of a repository README."""

    model_config = ConfigDict(frozen=True)

    exists: bool = True
    quality: int = Field(ge=0, le=100, description="Heuristic quality score, 0 (bare) to 100 (complete)")
    suggestions: list[str] = Field(default_factory=list)


class DocIssue(BaseModel):
    """A structural documentation problem found in the repository."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    description: str
    suggestion: str


class DocumentationReport(BaseModel):
    """Aggregate documentation analysis for a repository."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    readme: Optional[ReadmeAnalysis] = None
    issues: list[DocIssue] = Field(default_factory=list)

    @property
    def component_scores(self) -> dict[str, int]:
        """Quality of every documentation component present in the report."""
        scores = {}
        if self.readme is not None:
            scores["readme"] = self.readme.quality
        return scores

    @computed_field
    @property
    def overall_score(self) -> float:
        """Weighted mean of the present component scores, 0 when none are present."""
        return compute_overall_score(self.component_scores)


class SearchHit(BaseModel):
    """A file matched by GitHub code search."""

    model_config = ConfigDict(frozen=True)

    path: str
    url: str
    score: float = 0.0
    context: str = ""
