"""
유틸리티 함수들 패키지
"""

from .language import get_language_name

__all__ = [
    'get_language_name',
]
