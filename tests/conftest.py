"""
pytest 공통 fixture 정의

카탈로그/설정 파일 테스트용 fixture
"""

import tempfile
from pathlib import Path

import pytest

from core.catalog.models import Account, Catalog, Event, Formula
from core.catalog.sample import sample_catalog
from core.projection.formula_index import FormulaIndex


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def catalog() -> Catalog:
    """기본 카탈로그 (이벤트 3, 계정 4, 공식 8)"""
    return sample_catalog()


@pytest.fixture
def scenario_catalog() -> Catalog:
    """2 이벤트 × 2 계정 시나리오

    ev_1 "Presentment" → ad_1 차변 $ga
    ev_2 "Statement"   → ad_4 차변 $amt
    """
    return Catalog(
        events=(
            Event("ev_1", "Presentment", (("gross_amount", "$ga"),)),
            Event("ev_2", "Statement", (("amount", "$amt"),)),
        ),
        accounts=(
            Account("ad_1", "settlement/$issuer", frozenset({"$issuer"})),
            Account("ad_4", "card_receivables/$is_bnpl", frozenset({"$is_bnpl"})),
        ),
        formulas=(
            Formula("ev_1", "ad_1", "debit", "$ga"),
            Formula("ev_2", "ad_4", "debit", "$amt"),
        ),
    )


@pytest.fixture
def scenario_index(scenario_catalog: Catalog) -> FormulaIndex:
    """시나리오 카탈로그의 FormulaIndex"""
    return FormulaIndex.build(scenario_catalog.formulas)


@pytest.fixture
def temp_catalog_file(temp_dir: Path) -> Path:
    """테스트용 catalog.yaml 파일 생성"""
    content = """# 테스트용 catalog.yaml
events:
  - id: ev_1
    name: Presentment
    schema:
      - [gross_amount, $ga]
  - id: ev_2
    name: Statement
    schema:
      - [amount, $amt]

accounts:
  - id: ad_1
    address: settlement/$issuer
    params: [$issuer]
  - id: ad_4
    address: card_receivables/$is_bnpl
    params: [$is_bnpl]

formulas:
  - {event_id: ev_1, account_id: ad_1, polarity: debit, formula: $ga}
  - {event_id: ev_2, address_id: ad_4, polarity: DEBIT, formula: $amt}
"""
    path = temp_dir / "catalog.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def temp_settings_file(temp_dir: Path, temp_catalog_file: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (catalog.yaml 상대 경로)"""
    content = """catalog_path: catalog.yaml

display:
  debit_label: "Dr "
  credit_label: "Cr "

web:
  host: 0.0.0.0
  port: 9000

validate_on_load: false
"""
    path = temp_dir / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path
