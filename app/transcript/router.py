from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Request
from fastapi.responses import Response

from app.constants import ANY_METHOD
from app.container import Container
from app.transcript.enum import OutputFormat
from app.transcript.exception import TranscriptErrorCode, TranscriptException
from app.transcript.formatter import render
from app.transcript.service import TranscriptService

router = APIRouter()

@inject
async def get_transcript(
    request: Request,
    transcript_service: TranscriptService = Provide[Container.transcript_service],
):
    url = request.query_params.get("url")
    if not url:
        raise TranscriptException(TranscriptErrorCode.MISSING_URL)

    captions = await transcript_service.get_captions(url)

    output_format = OutputFormat.parse(request.query_params.get("output"))
    if output_format is None:
        raise TranscriptException(TranscriptErrorCode.INVALID_OUTPUT_TYPE)

    body, media_type = render(captions, output_format)
    return Response(content=body, media_type=media_type)


router.add_route("/api/transcript", get_transcript, methods=ANY_METHOD, include_in_schema=False)
