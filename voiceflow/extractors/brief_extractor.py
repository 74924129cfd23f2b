from __future__ import annotations

import re

from ..intents import BriefData, CreateBriefIntent
from .base import Extractor, first_match


class BriefExtractor(Extractor):
    # client name: "for Nike", "client Acme Corp, ..." or "Nike campaign"
    CLIENT_PATTERNS = [
        re.compile(r"(?:for|client|company)\s+([A-Z][a-zA-Z\s]+?)(?:\s+with|\s+about|\s+on|,|$)", re.I),
        re.compile(r"([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)?)\s+(?:brief|campaign|project)", re.I),
    ]
    # title: explicit "called X" wins over "brief for X"
    PATTERNS = [
        re.compile(r"(?:called|titled|named)\s+(.+?)(?:\s+for|\s+with|$)", re.I),
        re.compile(r"brief\s+(?:for\s+)?(.+?)(?:\s+with|\s+about|$)", re.I),
    ]

    def __init__(self, title_max_length: int = 60) -> None:
        self.title_max_length = title_max_length

    def extract(self, text: str, transcript: str) -> CreateBriefIntent:
        client = ""
        m = first_match(self.CLIENT_PATTERNS, transcript)
        if m:
            client = m.group(1).strip()

        title = transcript
        m = self.match(transcript)
        if m:
            title = m.group(1).strip()
        else:
            self.extractor_why = "no title phrase; using transcript"

        return CreateBriefIntent(
            data=BriefData(
                title=title[: self.title_max_length],
                client=client,
                description=transcript,
            )
        )
