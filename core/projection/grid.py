"""
그리드 투영

활성 이벤트(행) × 필터링된 계정(열) 그리드 생성.
각 셀은 해당 (이벤트, 계정) 쌍의 차변/대변 표현식을 가짐.

사용 예시:
```python
index = FormulaIndex.build(catalog.formulas)
accounts = filter_accounts(catalog.accounts, events, index)
rows = compute_grid(events, accounts, index)
columns = build_columns(accounts)
records = rows_to_records(rows)
```
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from core.catalog.models import Account, Event
from core.constants import Defaults
from core.projection.formula_index import FormulaIndex
from core.types import CellKind, Polarity

logger = logging.getLogger(__name__)


# =========================================================================
# 셀 내용 (태그 variant)
# =========================================================================


@dataclass(frozen=True)
class EmptyContent:
    """빈 셀"""

    kind: CellKind = CellKind.EMPTY

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class TextContent:
    """텍스트 셀"""

    value: str
    kind: CellKind = CellKind.TEXT

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class EventSummaryContent:
    """행 헤더 셀 (이벤트 요약)"""

    event: Event
    kind: CellKind = CellKind.EVENT_SUMMARY

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "event_id": self.event.id,
            "name": self.event.name,
        }


CellContent = Union[EmptyContent, TextContent, EventSummaryContent]

EMPTY = EmptyContent()


@dataclass(frozen=True)
class DirectionLabels:
    """차변/대변 표시 접두사"""

    debit: str = Defaults.DEBIT_LABEL
    credit: str = Defaults.CREDIT_LABEL

    def headers(self) -> tuple[str, str]:
        """컬럼 헤더용 (차변, 대변) 표기

        접두사의 공백을 제거하고, 비어 있으면 "D"/"C" 사용.
        """
        return self.debit.strip() or "D", self.credit.strip() or "C"


DEFAULT_LABELS = DirectionLabels()


# =========================================================================
# 행/셀
# =========================================================================


@dataclass(frozen=True)
class Cell:
    """그리드 셀

    debit_text/credit_text는 공식 원본 표현식 (없으면 빈 문자열).
    한 셀에는 최대 한쪽 방향만 채워짐.
    """

    account_id: str
    debit_text: str = ""
    credit_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.debit_text and not self.credit_text

    def display(
        self, labels: DirectionLabels = DEFAULT_LABELS
    ) -> tuple[CellContent, CellContent]:
        """표시용 (차변, 대변) 내용 반환"""
        debit: CellContent = (
            TextContent(labels.debit + self.debit_text) if self.debit_text else EMPTY
        )
        credit: CellContent = (
            TextContent(labels.credit + self.credit_text) if self.credit_text else EMPTY
        )
        return debit, credit

    def to_dict(self, labels: DirectionLabels = DEFAULT_LABELS) -> dict[str, Any]:
        debit, credit = self.display(labels)
        return {
            "account_id": self.account_id,
            "debit_text": self.debit_text,
            "credit_text": self.credit_text,
            "debit": debit.to_dict(),
            "credit": credit.to_dict(),
        }


@dataclass(frozen=True)
class Row:
    """그리드 행 (활성 이벤트 1개)"""

    event: Event
    cells: tuple[Cell, ...]

    def header(self) -> EventSummaryContent:
        """행 헤더 내용"""
        return EventSummaryContent(self.event)

    def cell_for(self, account_id: str) -> Cell | None:
        """계정 ID로 셀 조회"""
        for cell in self.cells:
            if cell.account_id == account_id:
                return cell
        return None

    def to_dict(self, labels: DirectionLabels = DEFAULT_LABELS) -> dict[str, Any]:
        return {
            "event_id": self.event.id,
            "header": self.header().to_dict(),
            "cells": [cell.to_dict(labels) for cell in self.cells],
        }


def _make_cell(event: Event, account: Account, index: FormulaIndex) -> Cell:
    formula = index.get(event.id, account.id)
    if formula is None:
        return Cell(account_id=account.id)

    # direction은 debit/credit 이외 값이면 MalformedFormulaError
    if formula.direction == Polarity.DEBIT:
        return Cell(account_id=account.id, debit_text=formula.expression)
    return Cell(account_id=account.id, credit_text=formula.expression)


def compute_grid(
    active_events: Sequence[Event],
    filtered_accounts: Sequence[Account],
    index: FormulaIndex,
) -> list[Row]:
    """그리드 행 생성

    행 순서 = active_events 순서, 열 순서 = filtered_accounts 순서.

    Args:
        active_events: 활성 이벤트 (행)
        filtered_accounts: 필터링된 계정 (열)
        index: 공식 인덱스

    Returns:
        Row 목록

    Raises:
        MalformedFormulaError: 공식 polarity가 debit/credit가 아닌 경우
    """
    rows = [
        Row(
            event=event,
            cells=tuple(_make_cell(event, acc, index) for acc in filtered_accounts),
        )
        for event in active_events
    ]
    logger.debug(f"그리드 생성: {len(rows)}행 × {len(filtered_accounts)}열")
    return rows


# =========================================================================
# 컬럼 레이아웃
# =========================================================================


@dataclass(frozen=True)
class Column:
    """리프 컬럼"""

    id: str
    header: str


@dataclass(frozen=True)
class ColumnGroup:
    """컬럼 그룹 (계정 주소 헤더 아래 D/C 컬럼)

    이벤트 라벨 컬럼은 account_id가 None이고 자식이 1개.
    """

    header: str
    columns: tuple[Column, ...]
    account_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": self.header,
            "account_id": self.account_id,
            "columns": [{"id": c.id, "header": c.header} for c in self.columns],
        }


def debit_column_id(account_id: str) -> str:
    return account_id + Defaults.DEBIT_COLUMN_SUFFIX


def credit_column_id(account_id: str) -> str:
    return account_id + Defaults.CREDIT_COLUMN_SUFFIX


def build_columns(
    filtered_accounts: Sequence[Account],
    labels: DirectionLabels = DEFAULT_LABELS,
) -> list[ColumnGroup]:
    """그리드 컬럼 레이아웃 생성

    첫 컬럼은 이벤트 라벨, 이후 계정별로 (차변, 대변) 2개 컬럼.
    """
    debit_header, credit_header = labels.headers()
    groups = [
        ColumnGroup(
            header="",
            columns=(Column(id=Defaults.EVENT_COLUMN_ID, header=""),),
        )
    ]
    for acc in filtered_accounts:
        groups.append(
            ColumnGroup(
                header=acc.address_template,
                account_id=acc.id,
                columns=(
                    Column(id=debit_column_id(acc.id), header=debit_header),
                    Column(id=credit_column_id(acc.id), header=credit_header),
                ),
            )
        )
    return groups


def rows_to_records(
    rows: Sequence[Row],
    labels: DirectionLabels = DEFAULT_LABELS,
) -> list[dict[str, str]]:
    """행을 테이블 컴포넌트용 평탄 레코드로 변환

    예: {"_event": "StatementTransaction", "ad_4_debit": "D $amt", "ad_4_credit": ""}
    """
    records = []
    for row in rows:
        record = {Defaults.EVENT_COLUMN_ID: row.event.name}
        for cell in row.cells:
            record[debit_column_id(cell.account_id)] = (
                labels.debit + cell.debit_text if cell.debit_text else ""
            )
            record[credit_column_id(cell.account_id)] = (
                labels.credit + cell.credit_text if cell.credit_text else ""
            )
        records.append(record)
    return records
