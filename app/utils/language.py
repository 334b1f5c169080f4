"""
언어 처리 유틸리티 함수들
"""

from app.constants import LANGUAGE_MAPPING


def get_language_name(language_code: str) -> str:
    """
    언어 코드에 해당하는 영문 언어 이름 반환 (예: 'en' -> 'English', 'pt-BR' -> 'Portuguese')

    매핑에 없는 코드는 코드 그대로 반환합니다. 에러 메시지 표시용이며 자막 트랙 선택에는 쓰지 않습니다.
    """
    code = LANGUAGE_MAPPING.get(language_code.lower(), language_code.lower())
    for name, mapped_code in LANGUAGE_MAPPING.items():
        if mapped_code == code and name.isalpha():
            return name.capitalize()
    return language_code
