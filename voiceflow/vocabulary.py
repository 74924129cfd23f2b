"""Static keyword tables shared by the classifier and the extractors.

All three tables are scanned in declaration order and the first keyword
contained in the text wins, so order matters: "progress" must come after
"in progress", "task" before "my tasks", and so on.
"""

from __future__ import annotations

STATUS_KEYWORDS: dict[str, str] = {
    "approved": "Approved",
    "approve": "Approved",
    "pending": "Pending",
    "in progress": "In Progress",
    "progress": "In Progress",
    "working": "In Progress",
    "started": "In Progress",
    "draft": "Draft",
    "review": "In Review",
    "reviewing": "In Review",
    "complete": "Completed",
    "completed": "Completed",
    "done": "Completed",
    "finished": "Completed",
    "on hold": "On Hold",
    "hold": "On Hold",
    "paused": "On Hold",
    "cancelled": "Cancelled",
    "cancel": "Cancelled",
}

NAVIGATION_KEYWORDS: dict[str, str] = {
    "dashboard": "dashboard",
    "home": "dashboard",
    "main": "dashboard",
    "projects": "projects",
    "project": "projects",
    "planning": "planning",
    "plan": "planning",
    "tasks": "tasks",
    "task": "tasks",
    "my tasks": "tasks",
    "sow": "sow",
    "statement of work": "sow",
    "teams": "teams",
    "team": "teams",
    "permissions": "teams",
    "forge": "forge",
    "workflow forge": "forge",
    "create workflow": "forge",
    "registry": "registry",
    "workflow registry": "registry",
    "workflows": "registry",
}

PRIORITY_KEYWORDS: dict[str, str] = {
    "low": "Low",
    "medium": "Medium",
    "normal": "Medium",
    "high": "High",
    "urgent": "Critical",
    "critical": "Critical",
    "asap": "Critical",
}

CANONICAL_STATUSES = frozenset(STATUS_KEYWORDS.values())
CANONICAL_PRIORITIES = frozenset(PRIORITY_KEYWORDS.values())
DESTINATIONS = frozenset(NAVIGATION_KEYWORDS.values())


def lookup(table: dict[str, str], text: str) -> str | None:
    """Return the value of the first keyword in *table* contained in *text*."""
    for keyword, value in table.items():
        if keyword in text:
            return value
    return None


def resolve_status(text: str) -> str | None:
    return lookup(STATUS_KEYWORDS, text.lower())


def resolve_priority(text: str) -> str | None:
    return lookup(PRIORITY_KEYWORDS, text.lower())


def resolve_destination(text: str) -> str | None:
    return lookup(NAVIGATION_KEYWORDS, text.lower())
