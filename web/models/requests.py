"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from pydantic import BaseModel, Field


class SelectionUpdateRequest(BaseModel):
    """활성 이벤트 변경 요청

    집합 전체 교체. 카탈로그에 없는 ID는 무시됨.
    """

    event_ids: list[str] = Field(..., description="활성화할 이벤트 ID 목록")
