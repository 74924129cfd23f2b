from __future__ import annotations

import re

from ..intents import DEFAULT_PROJECT_NAME, CreateProjectIntent, ProjectData
from ..vocabulary import PRIORITY_KEYWORDS, lookup
from .base import Extractor

CLIENT_RE = re.compile(r"(?:for|with|client)\s+([A-Z][a-zA-Z\s]+?)(?:\s+priority|\s+due|\s+description|$)", re.I)
DESCRIPTION_RE = re.compile(r"(?:description|about)\s+(.+)$", re.I)
DUE_RE = re.compile(r"\bdue\s+(?:on\s+|by\s+|date\s+)?(.+?)(?:\s+priority|\s+description|\s+about|$)", re.I)


class ProjectExtractor(Extractor):
    PATTERNS = [
        re.compile(
            r"(?:project|new project)\s+(?:called|named|titled)?\s*(.+?)(?:\s+for|\s+with|\s+client|\s+priority|\s+due|$)",
            re.I,
        ),
        re.compile(
            r"(?:create|start|make)\s+(?:a\s+)?project\s+(.+?)(?:\s+for|\s+with|\s+client|\s+priority|\s+due|$)",
            re.I,
        ),
    ]

    def extract(self, text: str, transcript: str) -> CreateProjectIntent:
        name = ""
        m = self.match(transcript)
        if m:
            name = m.group(1).strip()

        def _capture(pattern: re.Pattern[str]) -> str | None:
            found = pattern.search(transcript)
            return found.group(1).strip() if found else None

        return CreateProjectIntent(
            data=ProjectData(
                name=name or DEFAULT_PROJECT_NAME,
                client=_capture(CLIENT_RE),
                description=_capture(DESCRIPTION_RE),
                priority=lookup(PRIORITY_KEYWORDS, text),
                due_date=_capture(DUE_RE),
            )
        )
