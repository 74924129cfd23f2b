"""Route parsed intents to the callbacks that act on them.

The parser only says what the user asked for; the dispatcher is where a UI
or service plugs in the actual actions (navigate, create a task, ...).
Handlers receive the intent's ``data`` payload and may be plain functions
or coroutines.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from .describe import get_command_examples, get_intent_description
from .intents import HelpIntent, Intent, IntentType, UnknownIntent

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]
DispatchStatus = Literal["success", "help", "ignored", "unhandled", "error"]


@dataclass
class DispatchResult:
    status: DispatchStatus
    intent_type: IntentType
    description: str
    value: Any = None
    error: str | None = None
    examples: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in ("success", "help")


class CommandDispatcher:
    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, intent_type: IntentType, handler: Handler) -> None:
        if intent_type == "UNKNOWN":
            raise ValueError("UNKNOWN intents are never dispatched")
        self._handlers[intent_type] = handler

    def on(self, intent_type: IntentType) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""

        def _wrap(fn: Handler) -> Handler:
            self.register(intent_type, fn)
            return fn

        return _wrap

    def handlers(self) -> dict[str, Handler]:
        return dict(self._handlers)

    async def dispatch(self, intent: Intent) -> DispatchResult:
        description = get_intent_description(intent)

        if isinstance(intent, UnknownIntent):
            return DispatchResult("ignored", intent.type, description)

        handler = self._handlers.get(intent.type)
        if handler is None:
            if isinstance(intent, HelpIntent):
                return DispatchResult("help", intent.type, description, examples=get_command_examples())
            logger.warning("no handler registered for %s", intent.type)
            return DispatchResult("unhandled", intent.type, description)

        try:
            value = handler(intent.data)
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:
            logger.exception("handler for %s failed", intent.type)
            return DispatchResult("error", intent.type, description, error=str(e))

        logger.info("dispatched %s", intent.type)
        if isinstance(intent, HelpIntent):
            return DispatchResult("help", intent.type, description, value=value, examples=get_command_examples())
        return DispatchResult("success", intent.type, description, value=value)
