import pytest

from voiceflow.config import Settings
from voiceflow.intents import (
    AssignData,
    AssignTaskIntent,
    CreateBriefIntent,
    CreateProjectIntent,
    CreateTaskIntent,
    GenerateSowIntent,
    HelpIntent,
    NavigateData,
    NavigateIntent,
    StageData,
    StatusData,
    UnknownIntent,
    UpdateStageIntent,
    UpdateStatusIntent,
)
from voiceflow.parser import parse_voice_command
from voiceflow.telemetry import ParseRecord, parse_record_var


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "!!!", "123 456", "???!!!...", "é ü ñ"])
def test_parse_is_total(text):
    intent = parse_voice_command(text)
    assert isinstance(intent, UnknownIntent)
    assert intent.raw_text == text


def test_none_is_treated_as_empty():
    assert parse_voice_command(None) == UnknownIntent(raw_text="")


@pytest.mark.parametrize(
    "text",
    ["help me create a task", "What can you do?", "show me the commands", "help"],
)
def test_help_wins_over_everything(text):
    assert parse_voice_command(text) == HelpIntent()


def test_brief_checked_before_task():
    intent = parse_voice_command("create a brief for Nike and also create a task")
    assert isinstance(intent, CreateBriefIntent)


def test_sow_checked_before_task():
    assert isinstance(parse_voice_command("generate sow and create task"), GenerateSowIntent)


def test_task_checked_before_assign():
    assert isinstance(parse_voice_command("assign the new task to Maria"), CreateTaskIntent)


def test_project_creation():
    intent = parse_voice_command("Create new project called Website Redesign for Microsoft")
    assert isinstance(intent, CreateProjectIntent)
    assert intent.data.name == "Website Redesign"
    assert intent.data.client == "Microsoft"
    assert intent.data.priority is None


def test_mark_as_done_maps_to_completed():
    intent = parse_voice_command("mark project Atlas as done")
    assert intent == UpdateStatusIntent(data=StatusData(project_name="Atlas", new_status="Completed"))


def test_complete_shortcut():
    intent = parse_voice_command("complete the Pepsi project")
    assert intent == UpdateStatusIntent(data=StatusData(project_name="Pepsi", new_status="Completed"))


@pytest.mark.parametrize(
    "text, project, status",
    [
        ("cancel the Orion project", "Orion", "Cancelled"),
        ("pause Atlas", "Atlas", "On Hold"),
        ("Update Pepsi project to Approved", "Pepsi project", "Approved"),
        ("update status of Atlas to in progress", "Atlas", "In Progress"),
        ("update Atlas to Shipped", "Atlas", "Shipped"),
        ("update stuff to", "Unknown Project", "Unknown Status"),
    ],
)
def test_status_updates(text, project, status):
    assert parse_voice_command(text) == UpdateStatusIntent(
        data=StatusData(project_name=project, new_status=status)
    )


def test_assign_without_target_uses_placeholders():
    assert parse_voice_command("assign something") == AssignTaskIntent(
        data=AssignData(task_name="Unknown Task", assignee="Unknown")
    )


def test_assign_with_target():
    assert parse_voice_command("Assign the homepage review to Sarah Chen") == AssignTaskIntent(
        data=AssignData(task_name="the homepage review", assignee="Sarah Chen")
    )


def test_stage_move():
    assert parse_voice_command("move Atlas to review stage") == UpdateStageIntent(
        data=StageData(project_name="Atlas", new_stage="review")
    )


def test_stage_without_target_uses_placeholders():
    assert parse_voice_command("move to") == UpdateStageIntent(
        data=StageData(project_name="Unknown Project", new_stage="Unknown Stage")
    )


@pytest.mark.parametrize(
    "text, destination",
    [
        ("go to tasks", "tasks"),
        ("Show me my tasks", "tasks"),
        ("Go to dashboard", "dashboard"),
        ("Navigate to the workflow registry", "registry"),
        ("open team permissions", "teams"),
        # table order beats sentence order
        ("show me projects and the dashboard", "dashboard"),
        # loose mention without a navigation verb
        ("the planning board please", "planning"),
    ],
)
def test_navigation(text, destination):
    assert parse_voice_command(text) == NavigateIntent(data=NavigateData(destination=destination))


@pytest.mark.parametrize(
    "text, destination",
    [
        ("completed tasks", "tasks"),
        ("cancelled projects", "projects"),
        ("hold on, go to dashboard", "dashboard"),
        ("marketing plan", "planning"),
    ],
)
def test_status_verb_lookalikes_navigate(text, destination):
    assert parse_voice_command(text) == NavigateIntent(data=NavigateData(destination=destination))


def test_direct_action_needs_an_object():
    assert parse_voice_command("complete") == UnknownIntent(raw_text="complete")


def test_navigation_verb_is_terminal():
    # "brief" would otherwise match the brief branch
    assert parse_voice_command("Open the brief") == UnknownIntent(raw_text="Open the brief")


def test_navigation_unknown_keeps_original_case_by_default():
    intent = parse_voice_command("Open The Pod Bay Doors")
    assert intent == UnknownIntent(raw_text="Open The Pod Bay Doors")


def test_navigation_unknown_legacy_case():
    settings = Settings(LEGACY_NAV_UNKNOWN_CASE=True)
    intent = parse_voice_command("Open The Pod Bay Doors", settings=settings)
    assert intent == UnknownIntent(raw_text="open the pod bay doors")


def test_legacy_case_flag_read_from_env(monkeypatch):
    monkeypatch.setenv("VOICEFLOW_LEGACY_NAV_UNKNOWN_CASE", "1")
    assert parse_voice_command("Go To Mars") == UnknownIntent(raw_text="go to mars")


def test_unknown_fallback():
    text = "xyz completely unrelated gibberish"
    assert parse_voice_command(text) == UnknownIntent(raw_text=text)


def test_title_length_setting():
    settings = Settings(TITLE_MAX_LENGTH=5)
    intent = parse_voice_command("brief for Nike summer campaign", settings=settings)
    assert intent.data.title == "Nike "
    assert intent.data.description == "brief for Nike summer campaign"


def test_normalize_setting_folds_quotes_and_spaces():
    text = "Assign  “homepage”   to Sarah"
    raw = parse_voice_command(text)
    assert raw.data.task_name == "“homepage”"

    folded = parse_voice_command(text, settings=Settings(NORMALIZE_TRANSCRIPT=True))
    assert folded.data.task_name == '"homepage"'
    assert folded.data.assignee == "Sarah"


def test_parse_is_deterministic():
    text = "Create task Update homepage copy and assign to Sarah Chen urgent"
    assert parse_voice_command(text) == parse_voice_command(text)


def test_parse_record_filled_when_installed():
    rec = ParseRecord(req_id="t-1")
    token = parse_record_var.set(rec)
    try:
        parse_voice_command("assign something")
    finally:
        parse_record_var.reset(token)
    assert rec.intent == "ASSIGN_TASK"
    assert rec.extractor == "AssignExtractor"
    assert rec.needs_more_info is True
    assert rec.why


def test_parse_record_untouched_for_help():
    rec = ParseRecord()
    token = parse_record_var.set(rec)
    try:
        parse_voice_command("help")
    finally:
        parse_record_var.reset(token)
    assert rec.intent == "HELP"
    assert rec.extractor is None
    assert rec.needs_more_info is False
