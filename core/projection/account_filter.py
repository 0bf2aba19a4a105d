"""
계정 필터

활성 이벤트가 실제로 참조하는 계정만 추출
"""

import logging
from collections.abc import Iterable, Sequence

from core.catalog.models import Account, Event
from core.projection.formula_index import FormulaIndex

logger = logging.getLogger(__name__)


def filter_accounts(
    all_accounts: Sequence[Account],
    active_events: Iterable[Event],
    index: FormulaIndex,
) -> list[Account]:
    """활성 이벤트와 관련된 계정만 반환

    활성 이벤트의 공식이 하나도 없는 계정은 제외
    (모든 셀이 빈 컬럼이 되므로 표시하지 않음).
    카탈로그 원래 순서를 유지.

    Args:
        all_accounts: 전체 계정 (카탈로그 순서)
        active_events: 활성 이벤트
        index: 공식 인덱스

    Returns:
        필터링된 계정 목록 (all_accounts의 부분 수열)
    """
    event_ids = {ev.id for ev in active_events}
    relevant = index.account_ids_for(event_ids)

    result = [acc for acc in all_accounts if acc.id in relevant]

    logger.debug(
        f"계정 필터: 이벤트 {len(event_ids)}개 → 계정 {len(result)}/{len(all_accounts)}개"
    )
    return result
