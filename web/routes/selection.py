"""
Selection 라우트

멀티 선택 위젯용 이벤트 옵션 조회 및 활성 이벤트 변경 API
"""

from fastapi import APIRouter, Depends

from web.dependencies import get_grid_service
from web.models.requests import SelectionUpdateRequest
from web.models.responses import (
    EventOptionResponse,
    GridResponse,
    SelectionResponse,
)
from web.services.grid_service import GridService

router = APIRouter(prefix="/api", tags=["Selection"])


@router.get("/events/options", response_model=list[EventOptionResponse])
async def get_event_options(
    service: GridService = Depends(get_grid_service),
) -> list[EventOptionResponse]:
    """이벤트 옵션 목록 (카탈로그 순서)"""
    return [
        EventOptionResponse(id=o["id"], display_label=o["display_label"])
        for o in service.get_event_options()
    ]


@router.get("/selection", response_model=SelectionResponse)
async def get_selection(
    service: GridService = Depends(get_grid_service),
) -> SelectionResponse:
    """현재 활성 이벤트 조회"""
    return SelectionResponse(active_event_ids=service.get_active_event_ids())


@router.put("/selection", response_model=GridResponse)
async def update_selection(
    request: SelectionUpdateRequest,
    service: GridService = Depends(get_grid_service),
) -> GridResponse:
    """활성 이벤트 교체

    집합 전체를 교체하고 재계산된 그리드를 반환.
    카탈로그에 없는 ID는 무시.
    """
    return GridResponse(**service.update_selection(request.event_ids))


@router.post("/selection/reset", response_model=GridResponse)
async def reset_selection(
    service: GridService = Depends(get_grid_service),
) -> GridResponse:
    """전체 선택으로 초기화"""
    return GridResponse(**service.reset_selection())
