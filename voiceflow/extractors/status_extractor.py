from __future__ import annotations

import re

from ..intents import UNKNOWN_PROJECT, UNKNOWN_STATUS, StatusData, UpdateStatusIntent
from ..vocabulary import STATUS_KEYWORDS, lookup
from .base import Extractor

# Direct action verbs, anchored at the start of the command: (pattern, forced status).
# The project name stops at clause punctuation, so "hold on, go to dashboard"
# is not a status change.
_DIRECT_TAIL = r"\b\s+(?:the\s+)?(?:project\s+)?([^,;.!?]+?)(?:\s+project|\s*[.!?]*$)"
DIRECT_ACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^(?:complete|finish)" + _DIRECT_TAIL, re.I), STATUS_KEYWORDS["complete"]),
    (re.compile(r"^(?:cancel|terminate)" + _DIRECT_TAIL, re.I), STATUS_KEYWORDS["cancel"]),
    (re.compile(r"^(?:pause|hold|suspend)" + _DIRECT_TAIL, re.I), STATUS_KEYWORDS["hold"]),
]

MARK_OR_SET_RE = re.compile(r"(?:mark|set)\s+(?:project\s+)?(.+?)\s+(?:as|to)\s+(.+)", re.I)

FALLBACK_RE = re.compile(r"update\s+(.+?)\s+(?:status\s+)?to\s+(.+)", re.I)
_STATUS_WORD_RE = re.compile(r"\s*status\s*", re.I)


def match_direct_action(text: str) -> tuple[re.Match[str], str] | None:
    """Return the match and forced status for "complete X" style commands."""
    for pattern, status in DIRECT_ACTIONS:
        m = pattern.match(text.strip())
        if m:
            return m, status
    return None


def is_mark_or_set(text: str) -> bool:
    """True for commands that open with "mark <project> as/to <status>"."""
    return MARK_OR_SET_RE.match(text.strip()) is not None


def _resolve(status_text: str) -> str:
    """Map free status text onto a canonical status, else keep it verbatim."""
    return lookup(STATUS_KEYWORDS, status_text.lower().strip()) or status_text.strip()


class StatusExtractor(Extractor):
    # generic "<verb> <project> as/to <status>" forms, tried after the direct verbs
    PATTERNS = [
        MARK_OR_SET_RE,
        re.compile(r"update\s+(?:status\s+of\s+)?(.+?)\s+(?:to|as)\s+(.+)", re.I),
    ]

    def extract(self, text: str, transcript: str) -> UpdateStatusIntent:
        direct = match_direct_action(transcript)
        if direct:
            m, status = direct
            self.extractor_why = f"direct action -> {status}"
            return _intent(m.group(1).strip(), status)

        project_name = new_status = ""
        for pattern in self.PATTERNS:
            m = pattern.search(transcript)
            if not m:
                continue
            project_name = m.group(1).strip()
            new_status = _resolve(m.group(2))
            if project_name and new_status:
                return _intent(project_name, new_status)

        if not project_name:
            m = FALLBACK_RE.search(transcript)
            if m:
                project_name = _STATUS_WORD_RE.sub("", m.group(1), count=1).strip()
                new_status = _resolve(m.group(2))

        if not project_name or not new_status:
            self.extractor_why = "status phrase incomplete"
        return _intent(project_name or UNKNOWN_PROJECT, new_status or UNKNOWN_STATUS)


def _intent(project_name: str, new_status: str) -> UpdateStatusIntent:
    return UpdateStatusIntent(data=StatusData(project_name=project_name, new_status=new_status))
