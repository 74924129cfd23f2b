"""Human-readable rendering of intents and the help-screen examples."""

from __future__ import annotations

from typing import assert_never

from .intents import (
    AssignTaskIntent,
    CreateBriefIntent,
    CreateProjectIntent,
    CreateTaskIntent,
    GenerateSowIntent,
    HelpIntent,
    Intent,
    NavigateIntent,
    UnknownIntent,
    UpdateStageIntent,
    UpdateStatusIntent,
)

COMMAND_EXAMPLES: tuple[str, ...] = (
    '"Create a brief for Nike summer campaign"',
    '"Create a new task called Review designs"',
    '"Create new project called Website Redesign for Microsoft"',
    '"Assign task to Sarah Chen"',
    '"Generate SOW for Project Vision"',
    '"Update Pepsi project to Approved"',
    '"Show me my tasks"',
    '"Go to dashboard"',
)


def get_intent_description(intent: Intent) -> str:
    """Return a one-line confirmation sentence for *intent*."""
    if isinstance(intent, CreateBriefIntent):
        client = f" for {intent.data.client}" if intent.data.client else ""
        return f'Create a brief{client}: "{intent.data.title}"'
    if isinstance(intent, CreateTaskIntent):
        assignee = f" (assign to {intent.data.assignee})" if intent.data.assignee else ""
        return f'Create task: "{intent.data.title}"{assignee}'
    if isinstance(intent, CreateProjectIntent):
        client = f" for {intent.data.client}" if intent.data.client else ""
        return f'Create project: "{intent.data.name}"{client}'
    if isinstance(intent, AssignTaskIntent):
        return f'Assign "{intent.data.task_name}" to {intent.data.assignee}'
    if isinstance(intent, GenerateSowIntent):
        return f"Generate SOW for {intent.data.project_name}"
    if isinstance(intent, UpdateStatusIntent):
        return f"Update {intent.data.project_name} status to {intent.data.new_status}"
    if isinstance(intent, UpdateStageIntent):
        return f"Move {intent.data.project_name} to {intent.data.new_stage}"
    if isinstance(intent, NavigateIntent):
        return f"Navigate to {intent.data.destination}"
    if isinstance(intent, HelpIntent):
        return "Show available commands"
    if isinstance(intent, UnknownIntent):
        return "Command not recognized"
    assert_never(intent)


def get_command_examples() -> list[str]:
    """Example utterances for the help screen, in display order."""
    return list(COMMAND_EXAMPLES)
