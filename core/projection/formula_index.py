"""
공식 인덱스

(event_id, account_id) → Formula 조회 테이블
"""

import logging
from collections.abc import Iterable, Iterator

from core.catalog.errors import DuplicateFormulaError
from core.catalog.models import Formula

logger = logging.getLogger(__name__)


class FormulaIndex:
    """(event_id, account_id) 키로 공식을 찾는 인덱스

    키당 공식은 최대 1개. 중복 키는 빌드 시점에 실패하며,
    나중 항목이 앞 항목을 덮어쓰지 않음.
    """

    def __init__(self, formulas: dict[tuple[str, str], Formula]) -> None:
        self._formulas = formulas

    @classmethod
    def build(cls, formulas: Iterable[Formula]) -> "FormulaIndex":
        """공식 목록으로 인덱스 생성

        Args:
            formulas: 공식 목록 (정렬 불필요)

        Returns:
            FormulaIndex 인스턴스

        Raises:
            DuplicateFormulaError: 동일 키의 공식이 2개 이상인 경우
        """
        table: dict[tuple[str, str], Formula] = {}
        for formula in formulas:
            existing = table.get(formula.key)
            if existing is not None:
                logger.error(
                    f"공식 키 중복: event={formula.event_id}, account={formula.account_id}"
                )
                raise DuplicateFormulaError(formula.key, existing, formula)
            table[formula.key] = formula

        logger.debug(f"FormulaIndex 생성: {len(table)}건")
        return cls(table)

    def get(self, event_id: str, account_id: str) -> Formula | None:
        """공식 조회 (없으면 None)"""
        return self._formulas.get((event_id, account_id))

    def account_ids_for(self, event_ids: Iterable[str]) -> set[str]:
        """주어진 이벤트들의 공식이 참조하는 계정 ID 집합"""
        wanted = set(event_ids)
        return {
            account_id
            for (event_id, account_id) in self._formulas
            if event_id in wanted
        }

    def __len__(self) -> int:
        return len(self._formulas)

    def __iter__(self) -> Iterator[Formula]:
        return iter(self._formulas.values())

    def __contains__(self, key: object) -> bool:
        return key in self._formulas
