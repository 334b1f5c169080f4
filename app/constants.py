"""
애플리케이션 전역 상수 정의
"""


class YouTubeConfig:
    """YouTube 관련 설정"""
    WATCH_URL = "https://www.youtube.com/watch"
    DEFAULT_LANGUAGE = "en"

    # 자막 트랙 메타데이터가 시작되는 키
    CAPTION_TRACKS_KEY = '"captionTracks":'

    # User-Agent 설정
    USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"


# 빈 목록이면 Starlette Route 가 TRACE, 확장 메서드까지 모든 메서드를 허용
ANY_METHOD: list = []


class TranscriptConfig:
    """자막 출력 관련 설정"""
    DEFAULT_OUTPUT = "json"
    SRT_TIMESTAMP_SEPARATOR = " --> "
    JSON_MEDIA_TYPE = "application/json"
    TEXT_MEDIA_TYPE = "text/plain"


# 언어 코드 매핑 (ISO-639-1 형식으로 정규화)
LANGUAGE_MAPPING = {
    # 영어
    'english': 'en',
    'en-us': 'en',
    'en-gb': 'en',
    'english-us': 'en',
    'english-gb': 'en',

    # 한국어
    'korean': 'ko',
    'ko-kr': 'ko',

    # 일본어
    'japanese': 'ja',
    'ja-jp': 'ja',

    # 중국어
    'chinese': 'zh',
    'zh-cn': 'zh',
    'zh-tw': 'zh',

    # 스페인어
    'spanish': 'es',
    'es-es': 'es',
    'es-mx': 'es',

    # 프랑스어
    'french': 'fr',
    'fr-fr': 'fr',

    # 독일어
    'german': 'de',
    'de-de': 'de',

    # 이탈리아어
    'italian': 'it',
    'it-it': 'it',

    # 포르투갈어
    'portuguese': 'pt',
    'pt-br': 'pt',
    'pt-pt': 'pt',

    # 러시아어
    'russian': 'ru',
    'ru-ru': 'ru',

    # 기타 언어들
    'arabic': 'ar',
    'hindi': 'hi',
    'dutch': 'nl',
    'swedish': 'sv',
    'polish': 'pl',
    'turkish': 'tr',
    'vietnamese': 'vi',
    'indonesian': 'id',
}
