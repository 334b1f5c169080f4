from dotenv import load_dotenv

load_dotenv()

from dependency_injector import containers, providers

from app.constants import YouTubeConfig
from app.transcript.client import TranscriptClient
from app.transcript.service import TranscriptService


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        packages=[
            "app.transcript",
        ]
    )
    config = providers.Configuration()
    config.youtube.language_code.from_env("YOUTUBE_CAPTION_LANGUAGE", default=YouTubeConfig.DEFAULT_LANGUAGE)
    config.youtube.user_agent.from_env("YOUTUBE_USER_AGENT", default=YouTubeConfig.USER_AGENT)
    config.youtube.timeout.from_env("YOUTUBE_REQUEST_TIMEOUT", default="")

    # Transcript
    transcript_client = providers.Singleton(
        TranscriptClient,
        user_agent=config.youtube.user_agent,
        timeout=config.youtube.timeout,
    )
    transcript_service = providers.Factory(
        TranscriptService,
        client=transcript_client,
        language_code=config.youtube.language_code,
    )


# 전역 컨테이너 인스턴스
container = Container()
