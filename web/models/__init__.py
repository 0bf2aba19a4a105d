"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import SelectionUpdateRequest
from web.models.responses import (
    AccountResponse,
    CellContentResponse,
    CellResponse,
    ColumnGroupResponse,
    ColumnResponse,
    EventOptionResponse,
    GridRecordsResponse,
    GridResponse,
    HealthResponse,
    RowResponse,
    SelectionResponse,
)

__all__ = [
    # Requests
    "SelectionUpdateRequest",
    # Responses
    "HealthResponse",
    "EventOptionResponse",
    "SelectionResponse",
    "AccountResponse",
    "CellContentResponse",
    "CellResponse",
    "RowResponse",
    "ColumnResponse",
    "ColumnGroupResponse",
    "GridResponse",
    "GridRecordsResponse",
]
