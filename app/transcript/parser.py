import logging
import math
import re
from typing import List

from app.transcript.schema import CaptionSegment

logger = logging.getLogger(__name__)

TEXT_TAG_PATTERN = re.compile(r'<text start="([\d.]+)" dur="([\d.]+)".*?>(.*?)</text>')
_NUMBER_PREFIX_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+")

# 순서 유지: &amp; 를 가장 먼저 치환
_HTML_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def decode_html_entities(text: str) -> str:
    """다섯 가지 기본 엔티티만 디코딩합니다. 그 외 엔티티는 그대로 둡니다."""
    for entity, char in _HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def _parse_seconds(value: str) -> float:
    # 앞부분의 숫자만 사용 ("1.2.3" -> 1.2), 숫자가 없으면 NaN
    match = _NUMBER_PREFIX_PATTERN.match(value)
    if not match:
        return math.nan
    return float(match.group(0))


def parse_captions(raw_captions: str) -> List[CaptionSegment]:
    """timedtext 형식의 원본 자막에서 <text> 태그를 순서대로 추출합니다."""
    captions: List[CaptionSegment] = []
    for match in TEXT_TAG_PATTERN.finditer(raw_captions):
        start, duration, body = match.groups()
        captions.append(
            CaptionSegment(
                text=decode_html_entities(body),
                start=_parse_seconds(start),
                duration=_parse_seconds(duration),
            )
        )

    if not captions:
        logger.info("원본 자막에서 <text> 태그를 찾지 못했습니다.")
    return captions
