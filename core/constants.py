"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → ledgergrid/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    # 그리드 셀 방향 접두사 (차변/대변 구분)
    DEBIT_LABEL: str = "D "
    CREDIT_LABEL: str = "C "

    # 그리드 컬럼
    EVENT_COLUMN_ID: str = "_event"
    DEBIT_COLUMN_SUFFIX: str = "_debit"
    CREDIT_COLUMN_SUFFIX: str = "_credit"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    CLI_LOGS_DIR: Path = LOGS_DIR / "cli"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"
    CATALOG_FILE: Path = CONFIG_DIR / "catalog.yaml"
