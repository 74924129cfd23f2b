from __future__ import annotations

import re

from ..intents import UNKNOWN_ASSIGNEE, UNKNOWN_TASK, AssignData, AssignTaskIntent
from .base import Extractor


class AssignExtractor(Extractor):
    PATTERNS = [
        re.compile(r"assign\s+(?:task\s+)?(.+?)\s+to\s+([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)?)", re.I),
    ]

    def extract(self, text: str, transcript: str) -> AssignTaskIntent:
        task_name = assignee = ""
        m = self.match(transcript)
        if m:
            task_name = m.group(1).strip()
            assignee = m.group(2).strip()
        else:
            self.extractor_why = "no '<task> to <person>' phrase"

        return AssignTaskIntent(
            data=AssignData(
                task_name=task_name or UNKNOWN_TASK,
                assignee=assignee or UNKNOWN_ASSIGNEE,
            )
        )
