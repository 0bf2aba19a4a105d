"""
기본 카탈로그

카탈로그 파일이 없을 때 사용하는 카드 결제 예시 데이터.
(Mastercard 프레젠트먼트/차지백, 명세서 거래)
"""

from core.catalog.models import Account, Catalog, Event, Formula
from core.types import Polarity

SAMPLE_EVENTS: tuple[Event, ...] = (
    Event(
        id="ev_1",
        name="MasterCardFirstPresentment",
        schema=(("interchange_amount", "$ia"), ("gross_amount", "$ga")),
    ),
    Event(
        id="ev_3",
        name="MastercardChargebackCompletion",
        schema=(("interchange_amount", "$ia"), ("gross_amount", "$ga")),
    ),
    Event(
        id="ev_2",
        name="StatementTransaction",
        schema=(
            ("amount", "$amt"),
            ("customer_account_id", "$cuacc"),
            ("issuer", "$issuer"),
            ("is_bnpl_fee", "$is_bnpl"),
        ),
    ),
)

SAMPLE_ACCOUNTS: tuple[Account, ...] = (
    Account(
        id="ad_1",
        address_template="liability_payable_settlement_reconciliation_account/$issuer",
        params=frozenset({"$issuer"}),
    ),
    Account(
        id="ad_2",
        address_template="settlement_liability_account/$issuer",
        params=frozenset({"$issuer"}),
    ),
    Account(
        id="ad_3",
        address_template="interchange_revenue_account/$issuer",
        params=frozenset({"$issuer"}),
    ),
    Account(
        id="ad_4",
        address_template="card_receivables_account/$is_bnpl",
        params=frozenset({"$is_bnpl"}),
    ),
)

_DEBIT = Polarity.DEBIT.value
_CREDIT = Polarity.CREDIT.value

SAMPLE_FORMULAS: tuple[Formula, ...] = (
    Formula("ev_1", "ad_1", _DEBIT, "$ga"),
    Formula("ev_1", "ad_2", _CREDIT, "$ga - $ia"),
    Formula("ev_1", "ad_3", _CREDIT, "$ia"),
    Formula("ev_2", "ad_4", _DEBIT, "$amt"),
    Formula("ev_2", "ad_1", _CREDIT, "$amt"),
    Formula("ev_3", "ad_1", _CREDIT, "$ga"),
    Formula("ev_3", "ad_2", _DEBIT, "$ga - $ia"),
    Formula("ev_3", "ad_3", _DEBIT, "$ia"),
)


def sample_catalog() -> Catalog:
    """기본 카탈로그 반환"""
    return Catalog(
        events=SAMPLE_EVENTS,
        accounts=SAMPLE_ACCOUNTS,
        formulas=SAMPLE_FORMULAS,
    )
