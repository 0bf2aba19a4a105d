"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from fastapi import HTTPException

from core.projection.pipeline import ProjectionPipeline
from core.selection.controller import SelectionController
from web.services.grid_service import GridService


# =========================================================================
# 파이프라인 / 선택 상태 (앱 생명주기 동안 공유)
# =========================================================================

# lifespan 또는 테스트에서 설정되는 전역 인스턴스
_pipeline: ProjectionPipeline | None = None
_controller: SelectionController | None = None


def set_projection(
    pipeline: ProjectionPipeline | None,
    controller: SelectionController | None,
) -> None:
    """파이프라인과 선택 컨트롤러 설정

    컨트롤러를 파이프라인에 연결하여 초기 그리드를 계산.
    None을 넘기면 해제. 기존 파이프라인은 구독 해제.

    Args:
        pipeline: ProjectionPipeline 인스턴스
        controller: SelectionController 인스턴스
    """
    global _pipeline, _controller
    if _pipeline is not None:
        _pipeline.unbind()
    if pipeline is not None and controller is not None:
        pipeline.bind(controller)
    _pipeline = pipeline
    _controller = controller


def is_projection_ready() -> bool:
    """파이프라인 초기화 여부"""
    return _pipeline is not None and _controller is not None


def get_grid_service() -> GridService:
    """GridService 반환

    Raises:
        HTTPException: 파이프라인이 초기화되지 않은 경우 (503)
    """
    if _pipeline is None or _controller is None:
        raise HTTPException(status_code=503, detail="Projection pipeline is not initialized")
    return GridService(_pipeline, _controller)
