"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Polarity(str, Enum):
    """분개 방향 (차변/대변)"""

    DEBIT = "debit"
    CREDIT = "credit"


class CellKind(str, Enum):
    """그리드 셀 내용 종류

    렌더링 측에서 타입 검사 없이 kind로 분기
    """

    EMPTY = "empty"
    TEXT = "text"
    EVENT_SUMMARY = "event_summary"


class ReferenceKind(str, Enum):
    """카탈로그 참조 종류 (오류 보고용)"""

    EVENT = "event"
    ACCOUNT = "account"
