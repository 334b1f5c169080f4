"""자막 세그먼트를 json / srt / text 응답 본문으로 변환"""

import math
from datetime import datetime, timedelta, timezone
from typing import List, Tuple

from app.constants import TranscriptConfig
from app.transcript.enum import OutputFormat
from app.transcript.schema import CaptionSegment, CaptionSegmentList

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECONDS_PER_DAY = 24 * 60 * 60 * 1000


def format_timestamp(seconds: float) -> str:
    """
    초 단위 시간을 SRT 타임스탬프(HH:MM:SS,mmm)로 변환

    epoch 기준 시각으로 계산하므로 24시간 이상은 하루 단위로 다시 0시부터 표시됩니다.
    밀리초 미만은 버립니다.
    """
    if not math.isfinite(seconds):
        return "NaN:NaN:NaN,NaN"

    milliseconds = int(seconds * 1000) % _MILLISECONDS_PER_DAY
    moment = _EPOCH + timedelta(milliseconds=milliseconds)
    return (
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d},"
        f"{moment.microsecond // 1000:03d}"
    )


def to_json(captions: List[CaptionSegment]) -> str:
    return CaptionSegmentList.dump_json(captions).decode("utf-8")


def to_text(captions: List[CaptionSegment]) -> str:
    return "\n".join(caption.text for caption in captions)


def to_srt(captions: List[CaptionSegment]) -> str:
    entries = []
    for index, caption in enumerate(captions, start=1):
        start = format_timestamp(caption.start)
        end = format_timestamp(caption.start + caption.duration)
        entries.append(
            f"{index}\n{start}{TranscriptConfig.SRT_TIMESTAMP_SEPARATOR}{end}\n{caption.text}\n"
        )
    return "\n".join(entries)


def render(captions: List[CaptionSegment], output_format: OutputFormat) -> Tuple[str, str]:
    """(본문, media type) 반환"""
    if output_format is OutputFormat.JSON:
        return to_json(captions), TranscriptConfig.JSON_MEDIA_TYPE
    if output_format is OutputFormat.SRT:
        return to_srt(captions), TranscriptConfig.TEXT_MEDIA_TYPE
    return to_text(captions), TranscriptConfig.TEXT_MEDIA_TYPE
