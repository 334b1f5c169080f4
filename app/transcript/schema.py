from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class CaptionSegment(BaseModel):
    """재생 순서대로 정렬된 개별 자막 세그먼트"""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="자막 텍스트")
    start: float = Field(..., description="시작 시간 (초)")
    duration: float = Field(..., description="길이 (초)")


class CaptionTrack(BaseModel):
    """시청 페이지에 포함된 자막 트랙 메타데이터 (languageCode, baseUrl 외 필드는 무시)"""
    model_config = ConfigDict(populate_by_name=True)

    language_code: str = Field(..., alias="languageCode", description="언어 코드")
    base_url: str = Field(..., alias="baseUrl", description="자막 다운로드 URL")


CaptionSegmentList = TypeAdapter(List[CaptionSegment])
CaptionTrackList = TypeAdapter(List[CaptionTrack])
