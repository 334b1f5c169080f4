import pytest

from app.utils.language import get_language_name


@pytest.mark.parametrize("code, expected", [
    ("en", "English"),
    ("ja", "Japanese"),
    ("pt-BR", "Portuguese"),
    ("fil", "fil"),
])
def test_get_language_name(code, expected):
    """에러 메시지용 언어 이름은 매핑에 없으면 코드를 그대로 반환해야 한다."""
    assert get_language_name(code) == expected
