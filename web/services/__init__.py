"""
Web 서비스 패키지

라우트에서 호출하는 비즈니스 로직
"""

from web.services.grid_service import GridService

__all__ = [
    "GridService",
]
