"""
Grid 라우트

이벤트 × 계정 그리드 조회 API
"""

from fastapi import APIRouter, Depends

from web.dependencies import get_grid_service
from web.models.responses import GridRecordsResponse, GridResponse
from web.services.grid_service import GridService

router = APIRouter(prefix="/api", tags=["Grid"])


@router.get("/grid", response_model=GridResponse)
async def get_grid(
    service: GridService = Depends(get_grid_service),
) -> GridResponse:
    """현재 선택 기준 그리드 조회

    accounts: 컬럼 헤더용 필터링된 계정
    columns: 계정 주소 아래 D/C 컬럼 레이아웃
    rows: 활성 이벤트별 셀 (kind로 구분된 내용)
    """
    return GridResponse(**service.get_grid())


@router.get("/grid/records", response_model=GridRecordsResponse)
async def get_grid_records(
    service: GridService = Depends(get_grid_service),
) -> GridRecordsResponse:
    """테이블 컴포넌트용 평탄 레코드 조회

    예: {"_event": "StatementTransaction", "ad_4_debit": "D $amt", "ad_4_credit": ""}
    """
    return GridRecordsResponse(**service.get_records())
