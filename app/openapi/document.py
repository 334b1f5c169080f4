"""/openapi.json 으로 제공되는 고정 OpenAPI 문서"""

import copy

OPENAPI_DOCUMENT = {
    "openapi": "3.1.0",
    "info": {
        "title": "YouTube Transcript API",
        "description": "Retrieves transcript data for YouTube videos in JSON, SRT, or plain text format.",
        "version": "v1.1.0",
    },
    "servers": [
        {
            "url": "",
        }
    ],
    "paths": {
        "/api/transcript": {
            "get": {
                "description": "Get transcript for a specific YouTube video",
                "operationId": "GetYouTubeTranscript",
                "parameters": [
                    {
                        "name": "url",
                        "in": "query",
                        "description": "The full URL of the YouTube video",
                        "required": True,
                        "schema": {
                            "type": "string",
                        },
                    },
                    {
                        "name": "output",
                        "in": "query",
                        "description": "The desired output format (json, srt, or text)",
                        "required": False,
                        "schema": {
                            "type": "string",
                            "enum": ["json", "srt", "text"],
                            "default": "json",
                        },
                    },
                ],
                "responses": {
                    "200": {
                        "description": "Successful response",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "array",
                                    "items": {
                                        "type": "object",
                                        "properties": {
                                            "text": {"type": "string"},
                                            "start": {"type": "number"},
                                            "duration": {"type": "number"},
                                        },
                                    },
                                },
                            },
                            "text/plain": {
                                "schema": {
                                    "type": "string",
                                    "description": "SRT or plain text formatted transcript",
                                },
                            },
                        },
                    },
                    "400": {
                        "description": "Bad request - Missing YouTube URL or invalid output format",
                    },
                    "500": {
                        "description": "Transcript could not be retrieved (invalid URL, no matching captions, or upstream failure)",
                    },
                },
            },
        },
    },
    "components": {
        "schemas": {},
    },
}


def build_openapi_document(host: str) -> dict:
    """요청 Host 헤더로 servers[0].url 을 채운 문서 사본을 반환"""
    document = copy.deepcopy(OPENAPI_DOCUMENT)
    document["servers"][0]["url"] = f"https://{host}"
    return document
