"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- grid: 이벤트 × 계정 그리드 조회
- selection: 이벤트 옵션 조회, 활성 이벤트 변경
"""
