"""
카탈로그 모델

이벤트/계정/공식 값 객체와 무결성 오류 정의.
검증은 core.projection.validator 참고.
"""

from core.catalog.errors import (
    CatalogError,
    DuplicateCatalogIdError,
    DuplicateFormulaError,
    MalformedAccountError,
    MalformedFormulaError,
    UnknownReferenceError,
)
from core.catalog.models import Account, Catalog, Event, Formula

__all__ = [
    # 모델
    "Event",
    "Account",
    "Formula",
    "Catalog",
    # 오류
    "CatalogError",
    "DuplicateFormulaError",
    "MalformedFormulaError",
    "UnknownReferenceError",
    "DuplicateCatalogIdError",
    "MalformedAccountError",
]
