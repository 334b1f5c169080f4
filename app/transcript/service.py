import asyncio
import logging
from typing import List, Optional

from app.constants import YouTubeConfig
from app.transcript.client import TranscriptClient
from app.transcript.exception import TranscriptErrorCode, TranscriptException
from app.transcript.extractor import extract_caption_tracks, extract_video_id
from app.transcript.parser import parse_captions
from app.transcript.schema import CaptionSegment, CaptionTrack
from app.utils.language import get_language_name


class TranscriptService:
    def __init__(self, client: TranscriptClient, language_code: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.client = client
        # 지역 코드(pt-BR, es-419 등)를 그대로 비교하므로 잘라내거나 다른 언어로 대체하지 않음
        self.language_code = (language_code or "").strip() or YouTubeConfig.DEFAULT_LANGUAGE

    def select_caption_track(self, tracks: List[CaptionTrack]) -> CaptionTrack:
        wanted = self.language_code.lower()
        for track in tracks:
            if track.language_code.lower() == wanted:
                return track

        message = None
        if wanted != YouTubeConfig.DEFAULT_LANGUAGE:
            message = f"No {get_language_name(self.language_code)} captions found"
        raise TranscriptException(TranscriptErrorCode.LANGUAGE_CAPTIONS_NOT_FOUND, message=message)

    async def get_captions(self, url: str) -> List[CaptionSegment]:
        # 1) 영상 ID 추출
        video_id = extract_video_id(url)

        # 2) 시청 페이지에서 자막 트랙 목록 추출
        html = await asyncio.to_thread(self.client.get_watch_page, video_id)
        tracks = extract_caption_tracks(html)

        # 3) 선호 언어 자막 트랙 선택
        track = self.select_caption_track(tracks)
        self.logger.info(f"자막 트랙 선택: video_id={video_id}, lang_code={track.language_code}")

        # 4) 원본 자막 다운로드 후 세그먼트로 변환
        raw_captions = await asyncio.to_thread(self.client.get_caption_payload, track.base_url)
        captions = parse_captions(raw_captions)
        self.logger.info(f"자막 추출 완료: video_id={video_id}, segments={len(captions)}")
        return captions
