"""Intent value types produced by the voice command parser.

Every parse yields exactly one of the variants below. Variants share a
``type`` tag so the whole family works as a pydantic discriminated union:
``Intent`` validates JSON back into the right class, and ``model_dump(by_alias=True)``
emits the camelCase field names the UI callbacks expect (``projectName``,
``newStatus``, ``rawText`` ...).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BriefData(_Payload):
    title: str
    client: str
    description: str


class TaskData(_Payload):
    title: str
    assignee: str | None = None
    priority: str | None = None
    project: str | None = None


class AssignData(_Payload):
    task_name: str
    assignee: str


class SowData(_Payload):
    project_name: str
    client: str | None = None


class ProjectData(_Payload):
    name: str
    client: str | None = None
    description: str | None = None
    priority: str | None = None
    due_date: str | None = None


class StatusData(_Payload):
    project_name: str
    new_status: str


class StageData(_Payload):
    project_name: str
    new_stage: str


class NavigateData(_Payload):
    destination: str


class CreateBriefIntent(_Payload):
    type: Literal["CREATE_BRIEF"] = "CREATE_BRIEF"
    data: BriefData


class CreateTaskIntent(_Payload):
    type: Literal["CREATE_TASK"] = "CREATE_TASK"
    data: TaskData


class AssignTaskIntent(_Payload):
    type: Literal["ASSIGN_TASK"] = "ASSIGN_TASK"
    data: AssignData


class GenerateSowIntent(_Payload):
    type: Literal["GENERATE_SOW"] = "GENERATE_SOW"
    data: SowData


class CreateProjectIntent(_Payload):
    type: Literal["CREATE_PROJECT"] = "CREATE_PROJECT"
    data: ProjectData


class UpdateStatusIntent(_Payload):
    type: Literal["UPDATE_STATUS"] = "UPDATE_STATUS"
    data: StatusData


class UpdateStageIntent(_Payload):
    type: Literal["UPDATE_STAGE"] = "UPDATE_STAGE"
    data: StageData


class NavigateIntent(_Payload):
    type: Literal["NAVIGATE"] = "NAVIGATE"
    data: NavigateData


class HelpIntent(_Payload):
    type: Literal["HELP"] = "HELP"
    data: None = None


class UnknownIntent(_Payload):
    type: Literal["UNKNOWN"] = "UNKNOWN"
    raw_text: str


Intent = Annotated[
    Union[
        CreateBriefIntent,
        CreateTaskIntent,
        AssignTaskIntent,
        GenerateSowIntent,
        CreateProjectIntent,
        UpdateStatusIntent,
        UpdateStageIntent,
        NavigateIntent,
        HelpIntent,
        UnknownIntent,
    ],
    Field(discriminator="type"),
]

IntentType = Literal[
    "CREATE_BRIEF",
    "CREATE_TASK",
    "ASSIGN_TASK",
    "GENERATE_SOW",
    "CREATE_PROJECT",
    "UPDATE_STATUS",
    "UPDATE_STAGE",
    "NAVIGATE",
    "HELP",
    "UNKNOWN",
]

INTENT_ADAPTER: TypeAdapter[Intent] = TypeAdapter(Intent)


# Placeholders an extractor falls back to when it recognised the intent kind
# but could not capture a required entity.
UNKNOWN_TASK = "Unknown Task"
UNKNOWN_ASSIGNEE = "Unknown"
UNKNOWN_PROJECT = "Unknown Project"
UNKNOWN_STATUS = "Unknown Status"
UNKNOWN_STAGE = "Unknown Stage"
DEFAULT_TASK_TITLE = "New Task"
DEFAULT_PROJECT_NAME = "New Project"


def has_placeholders(intent: Intent) -> bool:
    """Return True when *intent* carries a sentinel instead of real data.

    Callers should treat such intents as a prompt to ask the user for more
    detail rather than executing them as-is.
    """
    if isinstance(intent, CreateBriefIntent):
        return intent.data.client == ""
    if isinstance(intent, CreateTaskIntent):
        return intent.data.title == DEFAULT_TASK_TITLE
    if isinstance(intent, AssignTaskIntent):
        return intent.data.task_name == UNKNOWN_TASK or intent.data.assignee == UNKNOWN_ASSIGNEE
    if isinstance(intent, GenerateSowIntent):
        return intent.data.project_name == DEFAULT_PROJECT_NAME
    if isinstance(intent, CreateProjectIntent):
        return intent.data.name == DEFAULT_PROJECT_NAME
    if isinstance(intent, UpdateStatusIntent):
        return intent.data.project_name == UNKNOWN_PROJECT or intent.data.new_status == UNKNOWN_STATUS
    if isinstance(intent, UpdateStageIntent):
        return intent.data.project_name == UNKNOWN_PROJECT or intent.data.new_stage == UNKNOWN_STAGE
    return False
