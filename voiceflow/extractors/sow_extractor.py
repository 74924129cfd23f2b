from __future__ import annotations

import re

from ..intents import DEFAULT_PROJECT_NAME, GenerateSowIntent, SowData
from .base import Extractor

CLIENT_RE = re.compile(r"\bclient\s+([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)?)", re.I)


class SowExtractor(Extractor):
    PATTERNS = [
        re.compile(r"sow\s+for\s+(.+?)(?:\s+project|\s+client|$)", re.I),
        re.compile(r"statement\s+of\s+work\s+for\s+(.+?)(?:\s+project|$)", re.I),
        re.compile(r"generate\s+sow\s+for\s+(.+)", re.I),
    ]

    def extract(self, text: str, transcript: str) -> GenerateSowIntent:
        project_name = ""
        m = self.match(transcript)
        if m:
            project_name = m.group(1).strip()

        client = None
        cm = CLIENT_RE.search(transcript)
        if cm:
            client = cm.group(1).strip()

        return GenerateSowIntent(
            data=SowData(project_name=project_name or DEFAULT_PROJECT_NAME, client=client)
        )
