"""
설정 로더

settings.yaml, catalog.yaml 로드
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.catalog.models import Catalog
from core.catalog.sample import sample_catalog
from core.constants import Defaults, Paths
from core.projection.grid import DirectionLabels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str = Defaults.WEB_HOST
    port: int = Defaults.WEB_PORT


@dataclass(frozen=True)
class AppSettings:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    catalog_path: Path = Paths.CATALOG_FILE
    labels: DirectionLabels = field(default_factory=DirectionLabels)
    web: WebConfig = field(default_factory=WebConfig)
    validate_on_load: bool = True


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


class CatalogLoadError(Exception):
    """카탈로그 파일 로드 실패 예외"""

    pass


def _read_yaml(path: Path, error_cls: type[Exception]) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise error_cls(f"{path.name} 파싱 실패: {e}") from e


def load_settings(path: Path | None = None) -> AppSettings:
    """settings.yaml 파일 로드

    파일이 없으면 기본값 사용.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppSettings 인스턴스

    Raises:
        SettingsLoadError: 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        logger.info(f"settings.yaml 없음, 기본값 사용: {path}")
        return AppSettings()

    data = _read_yaml(path, SettingsLoadError)
    if data is None:
        return AppSettings()
    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    # catalog_path는 settings.yaml 기준 상대 경로 허용
    catalog_path = Paths.CATALOG_FILE
    if data.get("catalog_path"):
        catalog_path = Path(data["catalog_path"])
        if not catalog_path.is_absolute():
            catalog_path = path.parent / catalog_path

    display = data.get("display") or {}
    labels = DirectionLabels(
        debit=str(display.get("debit_label", Defaults.DEBIT_LABEL)),
        credit=str(display.get("credit_label", Defaults.CREDIT_LABEL)),
    )

    web_data = data.get("web") or {}
    try:
        web = WebConfig(
            host=str(web_data.get("host", Defaults.WEB_HOST)),
            port=int(web_data.get("port", Defaults.WEB_PORT)),
        )
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"web.port 값이 올바르지 않습니다: {e}") from e

    return AppSettings(
        catalog_path=catalog_path,
        labels=labels,
        web=web,
        validate_on_load=bool(data.get("validate_on_load", True)),
    )


def load_catalog(path: Path | None = None) -> Catalog:
    """카탈로그 파일 로드

    파일이 없으면 기본 카탈로그 사용.
    무결성 검증은 하지 않음 (validate_catalog에서 수행).

    Args:
        path: catalog.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Catalog 인스턴스

    Raises:
        CatalogLoadError: 파싱 실패, 필수 필드 누락
    """
    if path is None:
        path = Paths.CATALOG_FILE

    if not path.exists():
        logger.info(f"카탈로그 파일 없음, 기본 카탈로그 사용: {path}")
        return sample_catalog()

    data = _read_yaml(path, CatalogLoadError)
    if data is None:
        raise CatalogLoadError(f"{path.name}이 비어 있습니다")
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{path.name} 최상위는 매핑이어야 합니다")

    for section in ("events", "accounts", "formulas"):
        if section not in data:
            raise CatalogLoadError(f"{path.name}에 '{section}' 섹션이 없습니다")

    try:
        catalog = Catalog.from_dict(data)
    except (KeyError, TypeError, IndexError) as e:
        raise CatalogLoadError(f"{path.name} 항목 형식 오류: {e}") from e

    logger.info(
        f"카탈로그 로드: {path} (이벤트 {len(catalog.events)}, "
        f"계정 {len(catalog.accounts)}, 공식 {len(catalog.formulas)})"
    )
    return catalog


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _settings: AppSettings | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._settings is None:
            self._settings = load_settings(settings_path)

    @property
    def catalog_path(self) -> Path:
        """카탈로그 파일 경로"""
        assert self._settings is not None
        return self._settings.catalog_path

    @property
    def labels(self) -> DirectionLabels:
        """차변/대변 표시 접두사"""
        assert self._settings is not None
        return self._settings.labels

    @property
    def web(self) -> WebConfig:
        """Web 서버 설정"""
        assert self._settings is not None
        return self._settings.web

    @property
    def validate_on_load(self) -> bool:
        """카탈로그 로드 직후 검증 여부"""
        assert self._settings is not None
        return self._settings.validate_on_load

    def load_catalog(self) -> Catalog:
        """설정된 경로의 카탈로그 로드"""
        return load_catalog(self.catalog_path)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._settings = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
