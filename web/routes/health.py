"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인
"""

from fastapi import APIRouter, Depends

from web.dependencies import get_grid_service
from web.models.responses import HealthResponse
from web.services.grid_service import GridService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: GridService = Depends(get_grid_service),
) -> HealthResponse:
    """서버 상태 확인

    Returns:
        HealthResponse: status와 카탈로그 규모
    """
    summary = service.get_summary()

    return HealthResponse(
        status="ok",
        events=summary["events"],
        accounts=summary["accounts"],
        formulas=summary["formulas"],
    )
