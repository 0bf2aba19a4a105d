"""
카탈로그 검증

카탈로그 로드 직후 실행하는 무결성 검사.
첫 번째 오류에서 즉시 실패 (부분 그리드 없음).

검사 항목:
- 이벤트/계정 ID 중복
- 계정 템플릿 토큰 ⊆ params
- 공식이 참조하는 이벤트/계정 존재 여부
- 공식 polarity (debit/credit)
- 공식 표현식 토큰 ⊆ 이벤트 schema ∪ 계정 params
- 공식 키 중복 (FormulaIndex.build)
"""

import logging
from collections.abc import Iterable

from core.catalog.errors import (
    CatalogError,
    DuplicateCatalogIdError,
    MalformedAccountError,
    MalformedFormulaError,
    UnknownReferenceError,
)
from core.catalog.models import Account, Catalog, Formula
from core.projection.formula_index import FormulaIndex
from core.types import ReferenceKind

logger = logging.getLogger(__name__)


def _check_unique_ids(ids: Iterable[str], kind: ReferenceKind) -> None:
    seen: set[str] = set()
    for ref_id in ids:
        if ref_id in seen:
            raise DuplicateCatalogIdError(kind.value, ref_id)
        seen.add(ref_id)


def _check_account(account: Account) -> None:
    for token in account.template_tokens:
        if token not in account.params:
            raise MalformedAccountError(account.id, token)


def _check_formula(formula: Formula, catalog: Catalog) -> None:
    event = catalog.event_by_id(formula.event_id)
    if event is None:
        raise UnknownReferenceError(
            ReferenceKind.EVENT.value, formula.event_id, formula.key
        )

    account = catalog.account_by_id(formula.account_id)
    if account is None:
        raise UnknownReferenceError(
            ReferenceKind.ACCOUNT.value, formula.account_id, formula.key
        )

    # polarity 해석 (실패 시 MalformedFormulaError)
    formula.direction

    available = event.tokens | account.params
    for token in formula.tokens:
        if token not in available:
            raise MalformedFormulaError(
                formula.key, f"undefined variable token {token}"
            )


def validate_catalog(catalog: Catalog) -> FormulaIndex:
    """카탈로그 무결성 검증

    Args:
        catalog: 검증할 카탈로그

    Returns:
        검증 과정에서 생성된 FormulaIndex

    Raises:
        CatalogError: 무결성 위반 (하위 타입으로 원인 구분)
    """
    try:
        _check_unique_ids((ev.id for ev in catalog.events), ReferenceKind.EVENT)
        _check_unique_ids((acc.id for acc in catalog.accounts), ReferenceKind.ACCOUNT)

        for account in catalog.accounts:
            _check_account(account)

        for formula in catalog.formulas:
            _check_formula(formula, catalog)

        index = FormulaIndex.build(catalog.formulas)
    except CatalogError as e:
        logger.error(f"카탈로그 검증 실패: {e}")
        raise

    logger.info(
        f"카탈로그 검증 완료: 이벤트 {len(catalog.events)}개, "
        f"계정 {len(catalog.accounts)}개, 공식 {len(index)}개"
    )
    return index
