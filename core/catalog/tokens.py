"""
변수 토큰 추출

`$ga`, `$is_bnpl` 형태의 변수 토큰을 문자열에서 추출
"""

import re

TOKEN_PATTERN = re.compile(r"\$[A-Za-z_][A-Za-z0-9_]*")


def extract_tokens(text: str) -> tuple[str, ...]:
    """문자열에서 변수 토큰 추출

    처음 등장한 순서를 유지하고 중복은 제거.

    Args:
        text: 계정 주소 템플릿 또는 공식 표현식

    Returns:
        토큰 튜플 (예: ("$ga", "$ia"))
    """
    seen: dict[str, None] = {}
    for match in TOKEN_PATTERN.finditer(text):
        seen.setdefault(match.group(0), None)
    return tuple(seen)
