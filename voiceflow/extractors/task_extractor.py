from __future__ import annotations

import re

from ..intents import DEFAULT_TASK_TITLE, CreateTaskIntent, TaskData
from ..vocabulary import PRIORITY_KEYWORDS, lookup
from .base import Extractor

ASSIGNEE_RE = re.compile(r"assign\s+(?:to\s+)?([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)?)", re.I)
PROJECT_RE = re.compile(
    r"\b(?:for|in|under)\s+(?:the\s+)?project\s+([A-Z][a-zA-Z0-9]*(?:\s+[A-Z][a-zA-Z0-9]*)?)(?=\s+with|\s+and|\s+priority|\s+assign|$)",
    re.I,
)


class TaskExtractor(Extractor):
    PATTERNS = [
        # "task called Review designs and assign ..." / "new task Review designs for ..."
        re.compile(
            r"(?:task|create task|new task)\s+(?:called|named|titled)?\s*(.+?)(?:\s+and\s+assign|\s+assign|\s+for|$)",
            re.I,
        ),
        # "add a task Review designs and ..."
        re.compile(r"(?:create|add|make)\s+(?:a\s+)?task\s+(.+?)(?:\s+and|\s+assign|\s+for|$)", re.I),
    ]

    def extract(self, text: str, transcript: str) -> CreateTaskIntent:
        title = ""
        m = self.match(transcript)
        if m:
            title = m.group(1).strip()

        assignee = None
        am = ASSIGNEE_RE.search(transcript)
        if am:
            assignee = am.group(1).strip()

        project = None
        pm = PROJECT_RE.search(transcript)
        if pm:
            project = pm.group(1).strip()

        return CreateTaskIntent(
            data=TaskData(
                title=title or DEFAULT_TASK_TITLE,
                assignee=assignee,
                priority=lookup(PRIORITY_KEYWORDS, text),
                project=project,
            )
        )
