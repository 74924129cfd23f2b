"""Rule-based classifier turning a finalized transcript into an Intent.

Classification is a fixed, ordered list of trigger rules checked against the
lower-cased transcript; the first rule that fires hands the transcript to
its extractor. The order resolves overlaps between keyword sets ("help me
create a task" is a help request, "brief ... and a task" is a brief) and
must not be reshuffled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import Settings, get_settings
from .extractors import (
    AssignExtractor,
    BriefExtractor,
    Extractor,
    NavigationExtractor,
    ProjectExtractor,
    SowExtractor,
    StageExtractor,
    StatusExtractor,
    TaskExtractor,
    is_mark_or_set,
    match_direct_action,
    normalize,
)
from .intents import HelpIntent, Intent, NavigateData, NavigateIntent, UnknownIntent, has_placeholders
from .telemetry import parse_record_var
from .vocabulary import NAVIGATION_KEYWORDS, lookup

logger = logging.getLogger(__name__)

Trigger = Callable[[str], bool]


def _contains(*phrases: str) -> Trigger:
    return lambda text: any(p in text for p in phrases)


def _starts_with(*phrases: str) -> Trigger:
    return lambda text: text.startswith(phrases)


def _status_trigger(text: str) -> bool:
    if "update" in text and ("status" in text or "to" in text):
        return True
    # "complete the Pepsi project", "pause Atlas"; "completed tasks" falls through
    if match_direct_action(text) is not None:
        return True
    # "mark project Atlas as done", "set Atlas to review"
    return is_mark_or_set(text)


def _stage_trigger(text: str) -> bool:
    return "move" in text and ("stage" in text or "phase" in text or "to" in text)


# (trigger, extractor factory), checked in order
RULES: list[tuple[Trigger, Callable[[Settings], Extractor]]] = [
    (
        _starts_with("go to", "show me", "open", "navigate to"),
        lambda s: NavigationExtractor(legacy_unknown_case=s.LEGACY_NAV_UNKNOWN_CASE),
    ),
    (_contains("brief", "creative brief", "market brief"), lambda s: BriefExtractor(s.TITLE_MAX_LENGTH)),
    (_contains("sow", "statement of work", "generate sow"), lambda s: SowExtractor()),
    (_contains("create task", "new task", "add task", "make a task"), lambda s: TaskExtractor()),
    (
        _contains("create project", "new project", "start project", "make a project"),
        lambda s: ProjectExtractor(),
    ),
    # "to" shows up in nearly every sentence, so any mention of "assign" lands here
    (_contains("assign"), lambda s: AssignExtractor()),
    (_status_trigger, lambda s: StatusExtractor()),
    (_stage_trigger, lambda s: StageExtractor()),
]

HELP_TRIGGER = _contains("help", "what can you do", "commands")


def parse_voice_command(transcript: str, settings: Settings | None = None) -> Intent:
    """Classify *transcript* and extract its entities.

    Never raises: input that matches nothing comes back as ``UnknownIntent``
    carrying the transcript.
    """
    settings = settings or get_settings()
    transcript = transcript or ""
    if settings.NORMALIZE_TRANSCRIPT:
        transcript = normalize(transcript)
    text = transcript.lower().strip()

    intent = _classify(text, transcript, settings)

    rec = parse_record_var.get()
    if rec is not None:
        rec.intent = intent.type
        rec.needs_more_info = has_placeholders(intent)
    logger.debug("voice command classified: intent=%s", intent.type)
    return intent


def _classify(text: str, transcript: str, settings: Settings) -> Intent:
    if HELP_TRIGGER(text):
        return HelpIntent()

    for trigger, build in RULES:
        if trigger(text):
            return build(settings).handle(text, transcript)

    # loose navigation: "the planning board please"
    destination = lookup(NAVIGATION_KEYWORDS, text)
    if destination is not None:
        return NavigateIntent(data=NavigateData(destination=destination))

    return UnknownIntent(raw_text=transcript)
