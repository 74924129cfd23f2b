import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../..")))

from voiceflow.extractors import BriefExtractor


def _extract(transcript, **kwargs):
    return BriefExtractor(**kwargs).extract(transcript.lower().strip(), transcript)


def test_brief_for_client():
    intent = _extract("Create a brief for Nike summer campaign")
    assert intent.data.client == "Nike summer campaign"
    assert intent.data.title == "Nike summer campaign"
    assert intent.data.description == "Create a brief for Nike summer campaign"


def test_called_title_wins():
    intent = _extract("Start a creative brief called Summer Splash for Pepsi")
    assert intent.data.title == "Summer Splash"
    assert intent.data.client == "Pepsi"


def test_long_transcript_truncated_title_full_description():
    text = "We really need someone to put together a comprehensive market brief"
    assert len(text) > 60
    intent = _extract(text)
    assert intent.data.title == text[:60]
    assert len(intent.data.title) == 60
    assert intent.data.description == text


def test_no_client_is_empty_string():
    intent = _extract("brief")
    assert intent.data.client == ""
    assert intent.data.title == "brief"


def test_custom_title_length():
    intent = _extract("brief called A very long working title", title_max_length=6)
    assert intent.data.title == "A very"
