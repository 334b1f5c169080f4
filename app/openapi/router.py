import json

from fastapi import APIRouter, Request
from fastapi.responses import Response

from app.constants import ANY_METHOD, TranscriptConfig
from app.openapi.document import build_openapi_document

router = APIRouter()

async def get_openapi_document(request: Request):
    document = build_openapi_document(request.headers.get("host"))
    return Response(
        content=json.dumps(document, indent=2),
        media_type=TranscriptConfig.JSON_MEDIA_TYPE,
    )


router.add_route("/openapi.json", get_openapi_document, methods=ANY_METHOD, include_in_schema=False)
