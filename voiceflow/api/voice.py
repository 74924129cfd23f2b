from __future__ import annotations

import logging
import time

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..config import get_settings
from ..describe import get_command_examples, get_intent_description
from ..errors import TranscriptTooLongError
from ..intents import Intent, has_placeholders
from ..logging_config import req_id_var
from ..parser import parse_voice_command
from ..telemetry import ParseRecord, parse_record_var, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/voice", tags=["Voice"])


class ParseRequest(BaseModel):
    transcript: str

    model_config = ConfigDict(json_schema_extra={"example": {"transcript": "Go to dashboard"}})


class ParseResponse(BaseModel):
    intent: Intent
    description: str
    needs_more_info: bool = Field(default=False)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "intent": {"type": "NAVIGATE", "data": {"destination": "dashboard"}},
                "description": "Navigate to dashboard",
                "needsMoreInfo": False,
            }
        },
    )


class ExamplesResponse(BaseModel):
    examples: list[str]


@router.post("/parse", response_model=ParseResponse)
async def parse(body: ParseRequest) -> ParseResponse:
    limit = get_settings().MAX_TRANSCRIPT_CHARS
    if len(body.transcript) > limit:
        raise TranscriptTooLongError(len(body.transcript), limit)

    rec = ParseRecord(req_id=req_id_var.get(), transcript=body.transcript, timestamp=utc_now().isoformat())
    token = parse_record_var.set(rec)
    started = time.perf_counter()
    try:
        intent = parse_voice_command(body.transcript)
    finally:
        parse_record_var.reset(token)
    rec.latency_ms = round((time.perf_counter() - started) * 1000, 3)

    logger.info(
        "voice command parsed",
        extra={"meta": rec.model_dump(exclude={"transcript"}, exclude_none=True)},
    )
    return ParseResponse(
        intent=intent,
        description=get_intent_description(intent),
        needs_more_info=has_placeholders(intent),
    )


@router.get("/examples", response_model=ExamplesResponse)
async def examples() -> ExamplesResponse:
    return ExamplesResponse(examples=get_command_examples())
