from __future__ import annotations

import re
import unicodedata
from abc import ABC, abstractmethod
from re import Pattern

from ..intents import Intent
from ..telemetry import parse_record_var


class Extractor(ABC):
    """Abstract base class for the per-intent entity extractors.

    Subclasses declare an ordered ``PATTERNS`` list; ``match`` evaluates it
    first-match-wins against the original-case transcript.
    """

    PATTERNS: list[Pattern[str]] = []

    # Short human-readable note an extractor may set while running, copied
    # into the current ParseRecord for observability. Never include the
    # transcript itself.
    extractor_why: str | None = None

    def match(self, transcript: str) -> re.Match | None:
        return first_match(self.PATTERNS, transcript)

    @abstractmethod
    def extract(self, text: str, transcript: str) -> Intent:
        """Build the intent from lower-cased *text* and original *transcript*."""
        raise NotImplementedError

    def handle(self, text: str, transcript: str) -> Intent:
        """Run ``extract`` and note which extractor produced the result."""
        self.extractor_why = None
        intent = self.extract(text, transcript)
        rec = parse_record_var.get()
        if rec is not None:
            rec.extractor = self.__class__.__name__
            rec.why = self.extractor_why
        return intent


def first_match(patterns: list[Pattern[str]], transcript: str) -> re.Match | None:
    for pat in patterns:
        m = pat.search(transcript)
        if m:
            return m
    return None


def normalize(text: str) -> str:
    """Replace curly quotes / fancy dashes and collapse whitespace.

    Speech-to-text engines and pasted text both produce these; folding them
    keeps the patterns simple.
    """
    text = unicodedata.normalize("NFKC", text)
    replacements = {
        "’": "'",
        "‘": "'",
        "“": '"',
        "”": '"',
        "—": "-",
        "–": "-",
        "…": "...",
        "\u00A0": " ",
    }
    for bad, good in replacements.items():
        text = text.replace(bad, good)
    return " ".join(text.split())
