"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    events: int = Field(..., description="카탈로그 이벤트 수")
    accounts: int = Field(..., description="카탈로그 계정 수")
    formulas: int = Field(..., description="공식 수")


class EventOptionResponse(BaseModel):
    """멀티 선택 위젯 옵션"""

    id: str = Field(..., description="이벤트 ID")
    display_label: str = Field(..., description="표시 이름")


class SelectionResponse(BaseModel):
    """현재 선택 상태"""

    active_event_ids: list[str] = Field(..., description="활성 이벤트 ID (카탈로그 순서)")


class AccountResponse(BaseModel):
    """컬럼 헤더용 계정"""

    id: str = Field(..., description="계정 ID")
    address: str = Field(..., description="계정 주소 템플릿")
    params: list[str] = Field(default_factory=list, description="템플릿 변수 토큰")


class CellContentResponse(BaseModel):
    """셀 내용 (kind로 구분: empty / text / event_summary)"""

    kind: str = Field(..., description="내용 종류")
    value: str | None = Field(default=None, description="텍스트 (kind=text)")
    event_id: str | None = Field(default=None, description="이벤트 ID (kind=event_summary)")
    name: str | None = Field(default=None, description="이벤트 이름 (kind=event_summary)")


class CellResponse(BaseModel):
    """그리드 셀"""

    account_id: str = Field(..., description="계정 ID")
    debit_text: str = Field(default="", description="차변 표현식 원문")
    credit_text: str = Field(default="", description="대변 표현식 원문")
    debit: CellContentResponse = Field(..., description="차변 표시 내용")
    credit: CellContentResponse = Field(..., description="대변 표시 내용")


class RowResponse(BaseModel):
    """그리드 행"""

    event_id: str = Field(..., description="이벤트 ID")
    header: CellContentResponse = Field(..., description="행 헤더")
    cells: list[CellResponse] = Field(default_factory=list, description="셀 목록 (계정 순서)")


class ColumnResponse(BaseModel):
    """리프 컬럼"""

    id: str = Field(..., description="컬럼 ID")
    header: str = Field(..., description="컬럼 헤더")


class ColumnGroupResponse(BaseModel):
    """컬럼 그룹 (계정 주소 아래 D/C)"""

    header: str = Field(..., description="그룹 헤더")
    account_id: str | None = Field(default=None, description="계정 ID (이벤트 컬럼은 None)")
    columns: list[ColumnResponse] = Field(default_factory=list, description="리프 컬럼")


class GridResponse(BaseModel):
    """그리드 응답"""

    active_event_ids: list[str] = Field(..., description="활성 이벤트 ID")
    accounts: list[AccountResponse] = Field(default_factory=list, description="필터링된 계정")
    columns: list[ColumnGroupResponse] = Field(default_factory=list, description="컬럼 레이아웃")
    rows: list[RowResponse] = Field(default_factory=list, description="행 목록")


class GridRecordsResponse(BaseModel):
    """평탄 레코드 응답 (테이블 컴포넌트용)"""

    columns: list[ColumnGroupResponse] = Field(default_factory=list, description="컬럼 레이아웃")
    records: list[dict[str, str]] = Field(default_factory=list, description="행 레코드")
