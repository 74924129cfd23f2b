from __future__ import annotations

from ..intents import Intent, NavigateData, NavigateIntent, UnknownIntent
from ..vocabulary import NAVIGATION_KEYWORDS, lookup
from .base import Extractor


class NavigationExtractor(Extractor):
    """Map "go to ..." style commands onto a navigation destination.

    Destinations are picked by keyword table order, not by where the keyword
    sits in the sentence: "show me the project tasks" goes to ``projects``.
    """

    def __init__(self, legacy_unknown_case: bool = False) -> None:
        # Older clients expected the lower-cased text back when nothing matched.
        self.legacy_unknown_case = legacy_unknown_case

    def extract(self, text: str, transcript: str) -> Intent:
        destination = lookup(NAVIGATION_KEYWORDS, text)
        if destination is not None:
            return NavigateIntent(data=NavigateData(destination=destination))
        self.extractor_why = "no destination keyword"
        return UnknownIntent(raw_text=text if self.legacy_unknown_case else transcript)
