from __future__ import annotations

import re

from ..intents import UNKNOWN_PROJECT, UNKNOWN_STAGE, StageData, UpdateStageIntent
from .base import Extractor


class StageExtractor(Extractor):
    PATTERNS = [
        # trailing "stage"/"phase" is dropped from the captured stage name
        re.compile(r"move\s+(.+?)\s+to\s+(.+?)(?:\s+stage|\s+phase)?$", re.I),
    ]

    def extract(self, text: str, transcript: str) -> UpdateStageIntent:
        project_name = new_stage = ""
        m = self.match(transcript)
        if m:
            project_name = m.group(1).strip()
            new_stage = m.group(2).strip()

        return UpdateStageIntent(
            data=StageData(
                project_name=project_name or UNKNOWN_PROJECT,
                new_stage=new_stage or UNKNOWN_STAGE,
            )
        )
