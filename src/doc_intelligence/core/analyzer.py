"""Repository documentation analyzer.

Lists the repository root, locates the README, scores it and assembles a
``DocumentationReport``. Each call is independent: nothing is cached and a
failed GitHub call aborts the whole analysis.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .clients import github
from .errors import AnalysisFailure
from .markdown import parse_markdown
from .models import ContentEntry, DocIssue, DocumentationReport, ReadmeAnalysis, Severity
from .scoring import QUALITY_THRESHOLD, readme_suggestions, score_readme

logger = logging.getLogger(__name__)

README_FILENAME = "readme.md"

MISSING_README_ISSUE = DocIssue(
    severity=Severity.HIGH,
    description="Missing README.md file",
    suggestion="Create a README.md file with project description and setup instructions",
)


def find_readme(entries: list[ContentEntry]) -> Optional[ContentEntry]:
    """First entry named README.md in any letter case; first match wins."""
    return next((e for e in entries if e.name.lower() == README_FILENAME), None)


def analyze_readme(content: str) -> ReadmeAnalysis:
    """Score README markdown and collect suggestions for it."""
    tokens = parse_markdown(content)
    return ReadmeAnalysis(
        exists=True,
        quality=score_readme(tokens),
        suggestions=readme_suggestions(tokens),
    )


async def analyze_documentation(
    token: str,
    owner: str,
    repo: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DocumentationReport:
    """Analyze the documentation of ``owner/repo``.

    Raises:
        AnalysisFailure: GitHub could not be reached, refused the request,
            or returned content that could not be decoded.
    """
    try:
        entries = await github.list_repository_contents(token, owner, repo, transport=transport)

        readme = None
        issues = []
        readme_entry = find_readme(entries)
        if readme_entry is not None:
            content = await github.fetch_file_text(token, owner, repo, readme_entry.path, transport=transport)
            readme = analyze_readme(content)
        else:
            issues.append(MISSING_README_ISSUE)
    except httpx.HTTPError as exc:
        raise AnalysisFailure(f"Could not reach GitHub for {owner}/{repo}: {exc}") from exc

    report = DocumentationReport(owner=owner, repo=repo, readme=readme, issues=issues)
    logger.info(
        "Analyzed %s/%s: overall score %.1f, %d issue(s)",
        owner, repo, report.overall_score, len(report.issues),
    )
    return report


def improvement_suggestions(report: DocumentationReport) -> list[str]:
    """Repository-level advice derived from a documentation report."""
    suggestions = []
    if report.readme is None:
        suggestions.append("Add a comprehensive README.md file")
    elif report.readme.quality < QUALITY_THRESHOLD:
        suggestions.append("Improve README.md content quality")

    for issue in report.issues:
        if issue.severity == Severity.HIGH:
            suggestions.append(issue.suggestion)
    return suggestions


async def suggest_improvements(
    token: str,
    owner: str,
    repo: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[str]:
    """Run a full analysis and turn it into a list of improvements."""
    report = await analyze_documentation(token, owner, repo, transport=transport)
    return improvement_suggestions(report)
