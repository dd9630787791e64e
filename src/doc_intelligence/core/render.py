"""Markdown renderings of tool results for the host to display."""

from __future__ import annotations

from .models import DocumentationReport, SearchHit


def render_report(report: DocumentationReport) -> str:
    lines = [
        f"# Documentation report for {report.owner}/{report.repo}",
        "",
        f"**Overall score:** {report.overall_score:.0f}/100",
        "",
    ]

    if report.readme is not None:
        lines.append(f"## README.md ({report.readme.quality}/100)")
        lines.append("")
        if report.readme.suggestions:
            lines.extend(f"- {s}" for s in report.readme.suggestions)
        else:
            lines.append("The README covers every checked section.")
        lines.append("")

    if report.issues:
        lines.append("## Issues")
        lines.append("")
        for issue in report.issues:
            lines.append(f"- **{issue.severity.value}**: {issue.description}. {issue.suggestion}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def render_suggestions(owner: str, repo: str, suggestions: list[str]) -> str:
    lines = [f"# Suggested improvements for {owner}/{repo}", ""]
    if suggestions:
        lines.extend(f"{i}. {s}" for i, s in enumerate(suggestions, start=1))
    else:
        lines.append("No improvements needed.")
    return "\n".join(lines) + "\n"


def render_search_results(query: str, hits: list[SearchHit]) -> str:
    lines = [f"# Results for '{query}'", ""]
    if not hits:
        lines.append("No matching files.")
    for hit in hits:
        lines.append(f"- [{hit.path}]({hit.url}) (score {hit.score:.2f})")
        if hit.context:
            # Indent the fragment as a quote under its list item.
            fragment = hit.context.strip().replace("\n", "\n  > ")
            lines.append(f"  > {fragment}")
    return "\n".join(lines) + "\n"
