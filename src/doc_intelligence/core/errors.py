"""Exceptions raised by the documentation tool.

Input problems are ``ValueError`` subclasses so callers that only know the
standard library still catch them. Everything that goes wrong while talking
to GitHub or reading what it returns surfaces as ``AnalysisFailure``.
"""

from __future__ import annotations

from typing import Optional


class DocIntelligenceError(Exception):
    """Base class for all documentation tool errors."""


class MissingCredential(DocIntelligenceError, ValueError):
    """No GitHub token was supplied."""


class MissingQuery(DocIntelligenceError, ValueError):
    """The search action was requested without a query."""


class InvalidAction(DocIntelligenceError, ValueError):
    """The requested action is not one of analyze, suggest or search."""


class InvalidInput(DocIntelligenceError, ValueError):
    """A parameter is empty or malformed."""


class AnalysisFailure(DocIntelligenceError):
    """A GitHub call failed or returned content that could not be analyzed."""


class GitHubAPIError(AnalysisFailure):
    """GitHub answered with a non-success status."""

    def __init__(self, status_code: int, message: str, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"GitHub API error {status_code}: {message}")
