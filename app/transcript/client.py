import logging
from typing import Optional

import requests

from app.constants import YouTubeConfig
from app.transcript.exception import TranscriptErrorCode, TranscriptException


class TranscriptClient:
    def __init__(self, user_agent: Optional[str] = None, timeout: Optional[float] = None):
        self.logger = logging.getLogger(__name__)
        self.user_agent = user_agent or YouTubeConfig.USER_AGENT
        self.timeout = float(timeout) if timeout else None

    def __get_text(self, url: str, params: Optional[dict] = None) -> str:
        try:
            resp = requests.get(
                url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.error(f"YouTube 요청 중 오류가 발생했습니다. url={url}, error={e}")
            raise TranscriptException(TranscriptErrorCode.NETWORK_ERROR)

        if resp.status_code != 200:
            self.logger.warning(f"YouTube 응답 상태 코드가 200이 아닙니다. url={url}, status={resp.status_code}")
        return resp.text

    def get_watch_page(self, video_id: str) -> str:
        """영상 시청 페이지 HTML 조회"""
        return self.__get_text(YouTubeConfig.WATCH_URL, params={"v": video_id})

    def get_caption_payload(self, base_url: str) -> str:
        """자막 트랙 baseUrl 에서 원본 자막(timedtext) 다운로드"""
        return self.__get_text(base_url)
