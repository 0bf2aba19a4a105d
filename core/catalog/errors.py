"""
카탈로그 무결성 오류

모두 입력 데이터의 구조적 오류. 재시도 대상이 아니며,
원인 키를 속성과 메시지에 담아 호출자에게 전달.
"""

from typing import Any


class CatalogError(Exception):
    """카탈로그 무결성 오류 (기본 클래스)"""

    pass


class DuplicateFormulaError(CatalogError):
    """동일 (event_id, account_id) 키에 공식이 2개 이상"""

    def __init__(
        self,
        key: tuple[str, str],
        existing: Any = None,
        duplicate: Any = None,
    ) -> None:
        self.key = key
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(f"Duplicate formula for (event={key[0]}, account={key[1]})")


class MalformedFormulaError(CatalogError):
    """공식 형식 오류 (polarity 불일치, 미정의 토큰 참조)"""

    def __init__(self, key: tuple[str, str], reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(
            f"Malformed formula (event={key[0]}, account={key[1]}): {reason}"
        )


class UnknownReferenceError(CatalogError):
    """공식이 카탈로그에 없는 이벤트/계정을 참조"""

    def __init__(self, kind: str, ref_id: str, formula_key: tuple[str, str]) -> None:
        self.kind = kind
        self.ref_id = ref_id
        self.formula_key = formula_key
        super().__init__(
            f"Formula (event={formula_key[0]}, account={formula_key[1]}) "
            f"references unknown {kind}: {ref_id}"
        )


class DuplicateCatalogIdError(CatalogError):
    """카탈로그 내 이벤트/계정 ID 중복"""

    def __init__(self, kind: str, ref_id: str) -> None:
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"Duplicate {kind} id in catalog: {ref_id}")


class MalformedAccountError(CatalogError):
    """계정 주소 템플릿이 params에 없는 토큰을 사용"""

    def __init__(self, account_id: str, token: str) -> None:
        self.account_id = account_id
        self.token = token
        super().__init__(
            f"Account {account_id} template uses undeclared token: {token}"
        )
