"""
core/types.py 테스트

Enum 값과 문자열 비교
"""

import pytest

from core.types import CellKind, Polarity, ReferenceKind


class TestPolarity:
    """Polarity Enum 테스트"""

    def test_values(self) -> None:
        assert Polarity.DEBIT.value == "debit"
        assert Polarity.CREDIT.value == "credit"

    def test_string_comparison(self) -> None:
        """str 상속으로 문자열과 비교 가능"""
        assert Polarity.DEBIT == "debit"

    def test_from_value(self) -> None:
        assert Polarity("credit") is Polarity.CREDIT

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            Polarity("DEBIT")


class TestCellKind:
    """CellKind Enum 테스트"""

    def test_values(self) -> None:
        assert [k.value for k in CellKind] == ["empty", "text", "event_summary"]


class TestReferenceKind:
    """ReferenceKind Enum 테스트"""

    def test_values(self) -> None:
        assert ReferenceKind.EVENT.value == "event"
        assert ReferenceKind.ACCOUNT.value == "account"
