import asyncio

import pytest

from voiceflow.dispatcher import CommandDispatcher
from voiceflow.intents import NavigateData
from voiceflow.parser import parse_voice_command


def _run(dispatcher, transcript):
    return asyncio.run(dispatcher.dispatch(parse_voice_command(transcript)))


def test_sync_handler_receives_payload():
    seen = []
    d = CommandDispatcher()
    d.register("NAVIGATE", lambda data: seen.append(data) or "navigated")

    result = _run(d, "go to tasks")

    assert result.ok
    assert result.status == "success"
    assert result.value == "navigated"
    assert result.description == "Navigate to tasks"
    assert seen == [NavigateData(destination="tasks")]


def test_async_handler_awaited():
    d = CommandDispatcher()

    @d.on("UPDATE_STATUS")
    async def _update(data):
        await asyncio.sleep(0)
        return (data.project_name, data.new_status)

    result = _run(d, "mark project Atlas as done")
    assert result.status == "success"
    assert result.value == ("Atlas", "Completed")


def test_unknown_is_ignored():
    d = CommandDispatcher()
    result = _run(d, "zzz")
    assert result.status == "ignored"
    assert result.intent_type == "UNKNOWN"
    assert not result.ok


def test_unknown_cannot_be_registered():
    with pytest.raises(ValueError):
        CommandDispatcher().register("UNKNOWN", lambda data: None)


def test_help_without_handler_returns_examples():
    result = _run(CommandDispatcher(), "help")
    assert result.status == "help"
    assert result.ok
    assert len(result.examples) == 8


def test_help_with_handler_keeps_value_and_examples():
    d = CommandDispatcher()
    d.register("HELP", lambda data: "shown")
    result = _run(d, "what can you do")
    assert result.status == "help"
    assert result.value == "shown"
    assert result.examples


def test_missing_handler_is_unhandled(caplog):
    result = _run(CommandDispatcher(), "create task Call the printer")
    assert result.status == "unhandled"
    assert result.intent_type == "CREATE_TASK"
    assert "no handler registered for CREATE_TASK" in caplog.text


def test_handler_error_is_reported():
    d = CommandDispatcher()

    def _boom(data):
        raise RuntimeError("printer on fire")

    d.register("CREATE_TASK", _boom)
    result = _run(d, "create task Call the printer")
    assert result.status == "error"
    assert result.error == "printer on fire"
    assert not result.ok


def test_handlers_returns_copy():
    d = CommandDispatcher()
    d.register("NAVIGATE", print)
    d.handlers().clear()
    assert "NAVIGATE" in d.handlers()
