"""
투영 파이프라인

(카탈로그, 활성 이벤트 ID) → GridResult 순수 함수와
FormulaIndex를 캐시하는 얇은 파사드.

재계산은 항상 전체를 다시 만든다 (증분 패치 없음).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from core.catalog.models import Account, Catalog
from core.projection.account_filter import filter_accounts
from core.projection.formula_index import FormulaIndex
from core.projection.grid import (
    DEFAULT_LABELS,
    ColumnGroup,
    DirectionLabels,
    Row,
    build_columns,
    compute_grid,
    rows_to_records,
)
from core.projection.validator import validate_catalog
from core.selection.controller import SelectionController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridResult:
    """파이프라인 결과

    accounts는 컬럼 헤더 렌더링용 필터링된 계정.
    """

    accounts: tuple[Account, ...]
    columns: tuple[ColumnGroup, ...]
    rows: tuple[Row, ...]
    labels: DirectionLabels = DEFAULT_LABELS

    def records(self) -> list[dict[str, str]]:
        """테이블 컴포넌트용 평탄 레코드"""
        return rows_to_records(self.rows, self.labels)

    def to_dict(self) -> dict[str, Any]:
        return {
            "accounts": [acc.to_dict() for acc in self.accounts],
            "columns": [group.to_dict() for group in self.columns],
            "rows": [row.to_dict(self.labels) for row in self.rows],
        }


def recompute(
    catalog: Catalog,
    active_event_ids: Iterable[str],
    index: FormulaIndex | None = None,
    labels: DirectionLabels = DEFAULT_LABELS,
) -> GridResult:
    """그리드 재계산

    Args:
        catalog: 카탈로그
        active_event_ids: 활성 이벤트 ID (카탈로그에 없는 ID는 무시)
        index: 공식 인덱스 (None이면 catalog.formulas로 생성)
        labels: 차변/대변 표시 접두사

    Returns:
        GridResult

    Raises:
        DuplicateFormulaError: index 생성 중 키 중복
        MalformedFormulaError: polarity 오류
    """
    if index is None:
        index = FormulaIndex.build(catalog.formulas)

    active = set(active_event_ids)
    events = [ev for ev in catalog.events if ev.id in active]
    accounts = filter_accounts(catalog.accounts, events, index)
    rows = compute_grid(events, accounts, index)

    return GridResult(
        accounts=tuple(accounts),
        columns=tuple(build_columns(accounts, labels)),
        rows=tuple(rows),
        labels=labels,
    )


class ProjectionPipeline:
    """카탈로그별 파이프라인

    FormulaIndex를 생성 시 한 번만 만들고 재사용.
    bind()로 SelectionController에 연결하면 선택 변경마다
    latest 결과를 새로 만든다. unbind()로 구독 해제.

    Args:
        catalog: 카탈로그 (읽기 전용)
        labels: 차변/대변 표시 접두사
        validate: True면 생성 시 검증 실행 (실패 시 CatalogError)
    """

    def __init__(
        self,
        catalog: Catalog,
        labels: DirectionLabels = DEFAULT_LABELS,
        validate: bool = True,
    ) -> None:
        self.catalog = catalog
        self.labels = labels
        if validate:
            self.index = validate_catalog(catalog)
        else:
            self.index = FormulaIndex.build(catalog.formulas)
        self._latest: GridResult | None = None
        self._controller: SelectionController | None = None

    def run(self, active_event_ids: Iterable[str]) -> GridResult:
        """활성 이벤트 기준 그리드 계산"""
        return recompute(self.catalog, active_event_ids, self.index, self.labels)

    def bind(self, controller: SelectionController) -> GridResult:
        """SelectionController 구독 및 초기 그리드 계산

        이미 다른 컨트롤러에 연결되어 있으면 먼저 해제.
        """
        self.unbind()
        controller.subscribe(self._on_selection_changed, replay=True)
        self._controller = controller
        assert self._latest is not None
        return self._latest

    def unbind(self) -> None:
        """SelectionController 구독 해제 (latest는 유지)"""
        if self._controller is not None:
            self._controller.unsubscribe(self._on_selection_changed)
            self._controller = None

    @property
    def is_bound(self) -> bool:
        return self._controller is not None

    @property
    def latest(self) -> GridResult | None:
        """마지막으로 계산된 그리드 (bind 이후)"""
        return self._latest

    def _on_selection_changed(self, active: frozenset[str]) -> None:
        self._latest = self.run(active)
        logger.debug(
            f"그리드 재계산: {len(self._latest.rows)}행, 계정 {len(self._latest.accounts)}개"
        )
