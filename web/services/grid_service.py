"""
Grid 서비스

선택 상태 변경과 그리드 조회
"""

import logging
from typing import Any

from core.projection.pipeline import GridResult, ProjectionPipeline
from core.selection.controller import SelectionController

logger = logging.getLogger(__name__)


class GridService:
    """Grid 서비스

    SelectionController의 상태를 바꾸고,
    바인딩된 ProjectionPipeline의 최신 결과를 반환.

    Args:
        pipeline: controller에 bind된 파이프라인
        controller: 선택 컨트롤러
    """

    def __init__(self, pipeline: ProjectionPipeline, controller: SelectionController):
        self.pipeline = pipeline
        self.controller = controller

    def _latest(self) -> GridResult:
        latest = self.pipeline.latest
        if latest is None:
            latest = self.pipeline.run(self.controller.active_event_ids)
        return latest

    def get_active_event_ids(self) -> list[str]:
        """활성 이벤트 ID (카탈로그 순서)"""
        return [ev.id for ev in self.controller.active_events()]

    def get_event_options(self) -> list[dict[str, Any]]:
        """멀티 선택 위젯용 옵션"""
        return [option.to_dict() for option in self.controller.event_options()]

    def get_grid(self) -> dict[str, Any]:
        """현재 그리드 조회"""
        data = self._latest().to_dict()
        data["active_event_ids"] = self.get_active_event_ids()
        return data

    def get_records(self) -> dict[str, Any]:
        """테이블 컴포넌트용 평탄 레코드 조회"""
        latest = self._latest()
        return {
            "columns": [group.to_dict() for group in latest.columns],
            "records": latest.records(),
        }

    def update_selection(self, event_ids: list[str]) -> dict[str, Any]:
        """활성 이벤트 교체 후 재계산된 그리드 반환

        카탈로그에 없는 ID는 무시.
        """
        with self.controller.exclusive():
            applied = self.controller.set_active(event_ids)
            logger.info(f"선택 변경 요청: {len(event_ids)}개 → 적용 {len(applied)}개")
            return self.get_grid()

    def reset_selection(self) -> dict[str, Any]:
        """전체 선택으로 초기화 후 그리드 반환"""
        with self.controller.exclusive():
            self.controller.reset()
            return self.get_grid()

    def get_summary(self) -> dict[str, int]:
        """카탈로그 규모 요약 (헬스 체크용)"""
        catalog = self.pipeline.catalog
        return {
            "events": len(catalog.events),
            "accounts": len(catalog.accounts),
            "formulas": len(self.pipeline.index),
        }
