"""
선택 컨트롤러

사용자가 고른 활성 이벤트 집합을 보관하고,
변경 시 구독자에게 재계산 신호를 보냄.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from core.catalog.models import Event

logger = logging.getLogger(__name__)

SelectionListener = Callable[[frozenset[str]], None]


@dataclass(frozen=True)
class EventOption:
    """멀티 선택 위젯용 옵션"""

    id: str
    display_label: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "display_label": self.display_label}


class SelectionController:
    """활성 이벤트 선택 상태 관리

    - 초기값: 카탈로그 전체 선택
    - set_active: 집합 전체 교체 (증분 아님)
    - 카탈로그에 없는 ID는 조용히 무시
    - 재시작 시 전체 선택으로 초기화 (영속화 없음)

    상태는 Lock으로 보호하고, 조회는 불변 스냅샷을 반환.
    상태 교체와 구독자 호출은 재진입 가능한 알림 Lock 안에서 함께 수행하므로
    구독자는 변경 순서대로 통지받는다 (마지막 통지 == 현재 상태).

    Args:
        events: 전체 이벤트 카탈로그 (순서 유지)
    """

    def __init__(self, events: Sequence[Event]) -> None:
        self._events: tuple[Event, ...] = tuple(events)
        self._catalog_ids = frozenset(ev.id for ev in self._events)
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()
        self._active: frozenset[str] = self._catalog_ids
        self._listeners: list[SelectionListener] = []

    @property
    def active_event_ids(self) -> frozenset[str]:
        """현재 활성 이벤트 ID (스냅샷)"""
        with self._lock:
            return self._active

    def set_active(self, ids: Iterable[str]) -> frozenset[str]:
        """활성 이벤트 집합 교체

        Args:
            ids: 새 활성 이벤트 ID

        Returns:
            실제 적용된 활성 ID (카탈로그에 없는 ID 제외)
        """
        requested = frozenset(ids)
        unknown = requested - self._catalog_ids
        if unknown:
            logger.debug(f"카탈로그에 없는 이벤트 ID 무시: {sorted(unknown)}")

        applied = requested & self._catalog_ids
        with self._notify_lock:
            with self._lock:
                self._active = applied

            logger.info(f"활성 이벤트 변경: {len(applied)}/{len(self._catalog_ids)}개")
            self._notify(applied)
        return applied

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """다른 쓰기 작업을 막는 구간

        구간 안에서 set_active 후 조회하면 그 사이에 다른 변경이 끼어들지 않음.
        """
        with self._notify_lock:
            yield

    def reset(self) -> frozenset[str]:
        """기본값(전체 선택)으로 초기화"""
        return self.set_active(self._catalog_ids)

    def active_events(self) -> list[Event]:
        """활성 이벤트 목록 (카탈로그 순서 유지)"""
        active = self.active_event_ids
        return [ev for ev in self._events if ev.id in active]

    def event_options(self) -> list[EventOption]:
        """멀티 선택 위젯용 옵션 목록 (카탈로그 순서)"""
        return [EventOption(id=ev.id, display_label=ev.name) for ev in self._events]

    def subscribe(self, listener: SelectionListener, replay: bool = False) -> None:
        """선택 변경 구독

        Args:
            listener: 새 활성 ID 집합을 받는 콜백
            replay: True면 등록 직후 현재 상태로 한 번 호출
                (등록과 첫 호출 사이에 다른 변경이 끼어들지 않음)
        """
        with self._notify_lock:
            with self._lock:
                self._listeners.append(listener)
                active = self._active
            if replay:
                listener(active)

    def unsubscribe(self, listener: SelectionListener) -> None:
        """구독 해제 (등록되지 않은 경우 무시)"""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, active: frozenset[str]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(active)
