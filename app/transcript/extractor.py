import json
import logging
import re
from typing import List

from pydantic import ValidationError

from app.constants import YouTubeConfig
from app.transcript.exception import TranscriptErrorCode, TranscriptException
from app.transcript.schema import CaptionTrack, CaptionTrackList

logger = logging.getLogger(__name__)

# watch?v=, embed/, e/, v/, shorts/, live/, youtu.be/, /<playlist|user>/.../<id>
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts|live)/|.*[?&]v=)|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})"
)

_decoder = json.JSONDecoder()


def extract_video_id(url: str) -> str:
    """유튜브 URL에서 11자리 영상 ID를 추출합니다."""
    match = VIDEO_ID_PATTERN.search(url)
    if not match:
        raise TranscriptException(TranscriptErrorCode.INVALID_URL)
    return match.group(1)


def extract_caption_tracks(html: str) -> List[CaptionTrack]:
    """
    시청 페이지 HTML에서 "captionTracks" 배열을 찾아 CaptionTrack 리스트로 변환

    키 바로 뒤부터 JSON 값 하나만 디코딩하므로 배열 안에 중첩된 배열/객체나
    문자열 속 `]` 가 있어도 배열 끝을 정확히 찾습니다.
    """
    key_index = html.find(YouTubeConfig.CAPTION_TRACKS_KEY)
    if key_index < 0:
        raise TranscriptException(TranscriptErrorCode.CAPTIONS_NOT_FOUND)

    value_index = key_index + len(YouTubeConfig.CAPTION_TRACKS_KEY)
    while value_index < len(html) and html[value_index].isspace():
        value_index += 1

    try:
        raw_tracks, _ = _decoder.raw_decode(html, value_index)
    except json.JSONDecodeError as e:
        logger.error(f"captionTracks JSON 파싱 중 오류가 발생했습니다. error={e}")
        raise TranscriptException(TranscriptErrorCode.MALFORMED_CAPTION_DATA)

    if not isinstance(raw_tracks, list):
        logger.error(f"captionTracks 값이 배열이 아닙니다. type={type(raw_tracks).__name__}")
        raise TranscriptException(TranscriptErrorCode.MALFORMED_CAPTION_DATA)

    try:
        return CaptionTrackList.validate_python(raw_tracks)
    except ValidationError as e:
        logger.error(f"자막 트랙 형식이 올바르지 않습니다. error={e}")
        raise TranscriptException(TranscriptErrorCode.MALFORMED_CAPTION_DATA)
