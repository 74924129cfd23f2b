"""Rule-based voice command parser for the VoiceFlow assistant."""

from .describe import get_command_examples, get_intent_description
from .dispatcher import CommandDispatcher, DispatchResult
from .intents import (
    AssignData,
    AssignTaskIntent,
    BriefData,
    CreateBriefIntent,
    CreateProjectIntent,
    CreateTaskIntent,
    GenerateSowIntent,
    HelpIntent,
    Intent,
    NavigateData,
    NavigateIntent,
    ProjectData,
    SowData,
    StageData,
    StatusData,
    TaskData,
    UnknownIntent,
    UpdateStageIntent,
    UpdateStatusIntent,
    has_placeholders,
)
from .parser import parse_voice_command

__all__ = [
    "AssignData",
    "AssignTaskIntent",
    "BriefData",
    "CommandDispatcher",
    "CreateBriefIntent",
    "CreateProjectIntent",
    "CreateTaskIntent",
    "DispatchResult",
    "GenerateSowIntent",
    "HelpIntent",
    "Intent",
    "NavigateData",
    "NavigateIntent",
    "ProjectData",
    "SowData",
    "StageData",
    "StatusData",
    "TaskData",
    "UnknownIntent",
    "UpdateStageIntent",
    "UpdateStatusIntent",
    "get_command_examples",
    "get_intent_description",
    "has_placeholders",
    "parse_voice_command",
]
