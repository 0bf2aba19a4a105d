"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from core.catalog.errors import CatalogError
from core.config.loader import get_settings
from core.logging import setup_logging
from core.projection.pipeline import ProjectionPipeline
from core.selection.controller import SelectionController
from web.dependencies import is_projection_ready, set_projection

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.routes import grid, health, selection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리

    카탈로그 로드 → 검증 → 파이프라인/선택 상태 초기화.
    검증 실패 시 앱 시작 중단 (부분 그리드 없음).
    이미 설정된 경우(테스트, 임베딩) 그대로 사용.
    """
    owned = False

    if not is_projection_ready():
        settings = get_settings()
        catalog = settings.load_catalog()
        try:
            pipeline = ProjectionPipeline(
                catalog,
                labels=settings.labels,
                validate=settings.validate_on_load,
            )
        except CatalogError as e:
            logger.error(f"Web: 카탈로그 무결성 오류로 시작 중단: {e}")
            raise

        set_projection(pipeline, SelectionController(catalog.events))
        owned = True
        logger.info("Web: 투영 파이프라인 초기화 완료")

    yield

    # 종료 시 - 직접 만든 상태만 정리
    if owned:
        set_projection(None, None)


app = FastAPI(
    title="LedgerGrid API",
    description="분개 규칙 이벤트 × 계정 그리드 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(grid.router)
app.include_router(selection.router)


@app.get("/", include_in_schema=False)
async def home():
    """홈페이지 (API 문서로 리다이렉트)"""
    return RedirectResponse(url="/docs")
