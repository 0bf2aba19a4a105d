"""
카탈로그 도메인 모델

Event, Account, Formula 모두 불변 값 객체.
외부 로더가 한 번 생성한 뒤 읽기 전용으로 공유.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from core.catalog.errors import MalformedFormulaError
from core.catalog.tokens import extract_tokens
from core.types import Polarity


@dataclass(frozen=True)
class Event:
    """이벤트 타입

    schema는 (필드명, 변수 토큰) 쌍의 순서 있는 튜플.
    예: (("gross_amount", "$ga"), ("interchange_amount", "$ia"))
    """

    id: str
    name: str
    schema: tuple[tuple[str, str], ...] = ()

    @property
    def tokens(self) -> frozenset[str]:
        """schema가 노출하는 변수 토큰 집합"""
        return frozenset(token for _, token in self.schema)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "id": self.id,
            "name": self.name,
            "schema": [[field_name, token] for field_name, token in self.schema],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Event":
        """딕셔너리에서 생성 (역직렬화용)"""
        return Event(
            id=str(data["id"]),
            name=str(data["name"]),
            schema=tuple(
                (str(pair[0]), str(pair[1])) for pair in data.get("schema") or []
            ),
        )


@dataclass(frozen=True)
class Account:
    """원장 계정

    address_template에 변수 토큰이 포함됨.
    예: "card_receivables_account/$is_bnpl"
    """

    id: str
    address_template: str
    params: frozenset[str] = frozenset()

    @property
    def template_tokens(self) -> tuple[str, ...]:
        """템플릿에 포함된 토큰 (등장 순서)"""
        return extract_tokens(self.address_template)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "id": self.id,
            "address": self.address_template,
            "params": sorted(self.params),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Account":
        """딕셔너리에서 생성 (역직렬화용)

        address_template 또는 address 키 모두 허용
        """
        address = data.get("address_template", data.get("address"))
        if address is None:
            raise KeyError("address")
        return Account(
            id=str(data["id"]),
            address_template=str(address),
            params=frozenset(str(p) for p in data.get("params") or []),
        )


@dataclass(frozen=True)
class Formula:
    """분개 규칙

    (event_id, account_id)가 복합 키.
    polarity는 로더가 준 원본 문자열을 그대로 보관하고,
    검증/투영 단계에서 Polarity로 해석.
    """

    event_id: str
    account_id: str
    polarity: str
    expression: str

    @property
    def key(self) -> tuple[str, str]:
        """복합 키 (event_id, account_id)"""
        return (self.event_id, self.account_id)

    @property
    def direction(self) -> Polarity:
        """polarity를 Polarity로 해석

        Raises:
            MalformedFormulaError: debit/credit 이외의 값인 경우
        """
        try:
            return Polarity(self.polarity)
        except ValueError as e:
            raise MalformedFormulaError(
                self.key, f"unknown polarity: {self.polarity!r}"
            ) from e

    @property
    def tokens(self) -> tuple[str, ...]:
        """표현식이 참조하는 변수 토큰"""
        return extract_tokens(self.expression)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "event_id": self.event_id,
            "account_id": self.account_id,
            "polarity": self.polarity,
            "formula": self.expression,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Formula":
        """딕셔너리에서 생성 (역직렬화용)

        account_id 대신 address_id, expression 대신 formula 키도 허용
        """
        account_id = data.get("account_id", data.get("address_id"))
        expression = data.get("expression", data.get("formula"))
        if account_id is None:
            raise KeyError("account_id")
        if expression is None:
            raise KeyError("expression")
        polarity = data["polarity"]
        if isinstance(polarity, Polarity):
            polarity = polarity.value
        return Formula(
            event_id=str(data["event_id"]),
            account_id=str(account_id),
            polarity=str(polarity).lower(),
            expression=str(expression),
        )


@dataclass(frozen=True)
class Catalog:
    """카탈로그 묶음 (이벤트, 계정, 공식)

    events/accounts 순서가 그리드의 행/열 순서를 결정
    """

    events: tuple[Event, ...]
    accounts: tuple[Account, ...]
    formulas: tuple[Formula, ...]

    @property
    def event_ids(self) -> frozenset[str]:
        """전체 이벤트 ID 집합"""
        return frozenset(ev.id for ev in self.events)

    @cached_property
    def _events_by_id(self) -> dict[str, Event]:
        # ID 중복 시 먼저 나온 항목 유지
        lookup: dict[str, Event] = {}
        for ev in self.events:
            lookup.setdefault(ev.id, ev)
        return lookup

    @cached_property
    def _accounts_by_id(self) -> dict[str, Account]:
        lookup: dict[str, Account] = {}
        for acc in self.accounts:
            lookup.setdefault(acc.id, acc)
        return lookup

    def event_by_id(self, event_id: str) -> Event | None:
        """ID로 이벤트 조회"""
        return self._events_by_id.get(event_id)

    def account_by_id(self, account_id: str) -> Account | None:
        """ID로 계정 조회"""
        return self._accounts_by_id.get(account_id)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "events": [ev.to_dict() for ev in self.events],
            "accounts": [acc.to_dict() for acc in self.accounts],
            "formulas": [f.to_dict() for f in self.formulas],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Catalog":
        """딕셔너리에서 생성 (역직렬화용)"""
        return Catalog(
            events=tuple(Event.from_dict(e) for e in data.get("events") or []),
            accounts=tuple(Account.from_dict(a) for a in data.get("accounts") or []),
            formulas=tuple(Formula.from_dict(f) for f in data.get("formulas") or []),
        )
