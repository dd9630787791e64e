"""Plugin manifest: the tool's action schema and the settings it needs."""

from __future__ import annotations

import json

from .core.models import Action


class DocIntelligencePlugin:
    """Declarative description of the documentation tool for plugin hosts."""

    name = "Documentation Intelligence"
    tool_name = "analyze_github_documentation"
    description = (
        "Analyze a GitHub repository's documentation: score its README, "
        "suggest improvements, or search the repository for related docs."
    )

    parameters = {
        "type": "object",
        "properties": {
            "owner": {"type": "string", "description": "GitHub repository owner"},
            "repo": {"type": "string", "description": "GitHub repository name"},
            "action": {
                "type": "string",
                "enum": [a.value for a in Action],
                "description": "Action to perform: analyze, suggest, or search",
            },
            "query": {"type": "string", "description": "Search query when action is 'search'"},
        },
        "required": ["owner", "repo", "action"],
    }

    settings = [
        {
            "name": "githubToken",
            "label": "GitHub Token",
            "type": "password",
            "env": "GITHUB_TOKEN",
            "required": True,
            "description": (
                "GitHub personal access token with read access to repository contents. "
                "A fine-grained token limited to public repositories is enough for public "
                "repos; private repos need the Contents: read permission on them."
            ),
            "url": "https://github.com/settings/personal-access-tokens",
        },
    ]

    @classmethod
    def token_env_var(cls) -> str:
        return cls.settings[0]["env"]

    @classmethod
    def to_dict(cls) -> dict:
        return {
            "name": cls.name,
            "tool": cls.tool_name,
            "description": cls.description,
            "parameters": cls.parameters,
            "settings": cls.settings,
        }

    @classmethod
    def render(cls) -> str:
        return json.dumps(cls.to_dict(), indent=2)
