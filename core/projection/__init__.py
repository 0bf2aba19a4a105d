"""
분개 규칙 투영 엔진

이벤트 × 계정 그리드를 만드는 순수 함수 모음.

사용 예시:
```python
from core.projection import ProjectionPipeline
from core.selection import SelectionController

pipeline = ProjectionPipeline(catalog)
controller = SelectionController(catalog.events)
pipeline.bind(controller)

controller.set_active({"ev_2"})
result = pipeline.latest
```
"""

from core.projection.account_filter import filter_accounts
from core.projection.formula_index import FormulaIndex
from core.projection.grid import (
    DEFAULT_LABELS,
    Cell,
    CellContent,
    Column,
    ColumnGroup,
    DirectionLabels,
    EmptyContent,
    EventSummaryContent,
    Row,
    TextContent,
    build_columns,
    compute_grid,
    rows_to_records,
)
from core.projection.pipeline import GridResult, ProjectionPipeline, recompute
from core.projection.validator import validate_catalog

__all__ = [
    # 핵심 함수
    "FormulaIndex",
    "filter_accounts",
    "compute_grid",
    "build_columns",
    "rows_to_records",
    "recompute",
    "validate_catalog",
    # 파이프라인
    "ProjectionPipeline",
    "GridResult",
    # 그리드 타입
    "Row",
    "Cell",
    "Column",
    "ColumnGroup",
    "CellContent",
    "EmptyContent",
    "TextContent",
    "EventSummaryContent",
    "DirectionLabels",
    "DEFAULT_LABELS",
]
