"""
Web API 통합 테스트

FastAPI TestClient로 그리드/선택 API 시나리오 검증.
"""

from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.catalog.errors import UnknownReferenceError
from core.catalog.models import Catalog, Formula
from core.config.loader import Settings
from core.projection.pipeline import ProjectionPipeline
from core.selection.controller import SelectionController
from web.app import app
from web.dependencies import is_projection_ready, set_projection


@pytest.fixture
def client(scenario_catalog: Catalog) -> Iterator[TestClient]:
    """시나리오 카탈로그로 초기화된 TestClient"""
    set_projection(
        ProjectionPipeline(scenario_catalog),
        SelectionController(scenario_catalog.events),
    )
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        set_projection(None, None)


class TestHealth:
    """GET /health"""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "events": 2, "accounts": 2, "formulas": 2}


class TestSelectionApi:
    """Selection API"""

    def test_event_options(self, client: TestClient) -> None:
        response = client.get("/api/events/options")

        assert response.status_code == 200
        assert response.json() == [
            {"id": "ev_1", "display_label": "Presentment"},
            {"id": "ev_2", "display_label": "Statement"},
        ]

    def test_initial_selection_is_full(self, client: TestClient) -> None:
        response = client.get("/api/selection")
        assert response.json() == {"active_event_ids": ["ev_1", "ev_2"]}

    def test_update_selection_returns_grid(self, client: TestClient) -> None:
        """ev_2만 선택 → 1행 1셀"""
        response = client.put("/api/selection", json={"event_ids": ["ev_2"]})

        assert response.status_code == 200
        body = response.json()
        assert body["active_event_ids"] == ["ev_2"]
        assert [acc["id"] for acc in body["accounts"]] == ["ad_4"]
        assert len(body["rows"]) == 1
        cell = body["rows"][0]["cells"][0]
        assert cell["account_id"] == "ad_4"
        assert cell["debit_text"] == "$amt"
        assert cell["debit"] == {"kind": "text", "value": "D $amt", "event_id": None, "name": None}
        assert cell["credit"]["kind"] == "empty"

    def test_update_selection_ignores_unknown_ids(self, client: TestClient) -> None:
        response = client.put("/api/selection", json={"event_ids": ["ev_1", "ev_404"]})

        assert response.status_code == 200
        assert response.json()["active_event_ids"] == ["ev_1"]

    def test_update_selection_persists(self, client: TestClient) -> None:
        client.put("/api/selection", json={"event_ids": ["ev_2"]})
        assert client.get("/api/selection").json() == {"active_event_ids": ["ev_2"]}
        assert len(client.get("/api/grid").json()["rows"]) == 1

    def test_update_selection_invalid_body(self, client: TestClient) -> None:
        response = client.put("/api/selection", json={"ids": ["ev_2"]})
        assert response.status_code == 422

    def test_reset(self, client: TestClient) -> None:
        client.put("/api/selection", json={"event_ids": []})
        response = client.post("/api/selection/reset")

        assert response.status_code == 200
        assert response.json()["active_event_ids"] == ["ev_1", "ev_2"]


class TestGridApi:
    """Grid API"""

    def test_full_grid(self, client: TestClient) -> None:
        response = client.get("/api/grid")

        assert response.status_code == 200
        body = response.json()
        assert [acc["id"] for acc in body["accounts"]] == ["ad_1", "ad_4"]
        assert [group["account_id"] for group in body["columns"]] == [None, "ad_1", "ad_4"]
        assert [row["event_id"] for row in body["rows"]] == ["ev_1", "ev_2"]

        ev_1_cells = {c["account_id"]: c for c in body["rows"][0]["cells"]}
        assert ev_1_cells["ad_1"]["debit_text"] == "$ga"
        assert ev_1_cells["ad_4"]["debit"]["kind"] == "empty"

        header = body["rows"][0]["header"]
        assert header["kind"] == "event_summary"
        assert header["name"] == "Presentment"

    def test_empty_selection_grid(self, client: TestClient) -> None:
        client.put("/api/selection", json={"event_ids": []})
        body = client.get("/api/grid").json()

        assert body["accounts"] == []
        assert body["rows"] == []
        assert len(body["columns"]) == 1

    def test_records(self, client: TestClient) -> None:
        response = client.get("/api/grid/records")

        assert response.status_code == 200
        records = response.json()["records"]
        assert records[1] == {
            "_event": "Statement",
            "ad_1_debit": "",
            "ad_1_credit": "",
            "ad_4_debit": "D $amt",
            "ad_4_credit": "",
        }


class TestLifespan:
    """앱 시작 시 카탈로그 로드"""

    def setup_method(self) -> None:
        Settings.reset()

    def teardown_method(self) -> None:
        Settings.reset()
        set_projection(None, None)

    def test_loads_catalog_from_settings(self, temp_settings_file: Path) -> None:
        Settings(temp_settings_file)

        with TestClient(app) as test_client:
            assert is_projection_ready()
            body = test_client.get("/health").json()
            assert body["events"] == 2

            records = test_client.get("/api/grid/records").json()["records"]
            assert records[0]["ad_1_debit"] == "Dr $ga"

        assert not is_projection_ready()

    def test_invalid_catalog_aborts_startup(
        self, temp_dir: Path, catalog: Catalog, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """무결성 오류가 있으면 앱 시작 실패"""
        bad = replace(
            catalog,
            formulas=catalog.formulas + (Formula("ev_9", "ad_1", "debit", "$x"),),
        )
        settings = Settings(temp_dir / "missing.yaml")
        monkeypatch.setattr(Settings, "load_catalog", lambda self: bad)

        with pytest.raises(UnknownReferenceError):
            with TestClient(app):
                pass

        assert settings.validate_on_load is True
        assert not is_projection_ready()


class TestSetProjection:
    """전역 파이프라인 설정/해제"""

    def teardown_method(self) -> None:
        set_projection(None, None)

    def test_release_unbinds_pipeline(self, scenario_catalog: Catalog) -> None:
        pipeline = ProjectionPipeline(scenario_catalog)
        controller = SelectionController(scenario_catalog.events)
        set_projection(pipeline, controller)
        assert pipeline.is_bound

        set_projection(None, None)
        controller.set_active({"ev_2"})

        assert not is_projection_ready()
        assert not pipeline.is_bound
        assert len(pipeline.latest.rows) == 2

    def test_replace_unbinds_previous_pipeline(self, scenario_catalog: Catalog) -> None:
        old_pipeline = ProjectionPipeline(scenario_catalog)
        controller = SelectionController(scenario_catalog.events)
        set_projection(old_pipeline, controller)

        new_pipeline = ProjectionPipeline(scenario_catalog)
        set_projection(new_pipeline, controller)
        controller.set_active({"ev_2"})

        assert not old_pipeline.is_bound
        assert len(old_pipeline.latest.rows) == 2
        assert len(new_pipeline.latest.rows) == 1
