"""
core/projection/pipeline.py 테스트

recompute 순수 함수, ProjectionPipeline 캐시/바인딩
"""

import threading
from dataclasses import replace

import pytest

from core.catalog.errors import DuplicateFormulaError, UnknownReferenceError
from core.catalog.models import Catalog, Formula
from core.projection.formula_index import FormulaIndex
from core.projection.grid import DirectionLabels
from core.projection.pipeline import ProjectionPipeline, recompute
from core.selection.controller import SelectionController


class TestRecompute:
    """recompute 함수 테스트"""

    def test_scenario(self, scenario_catalog: Catalog) -> None:
        result = recompute(scenario_catalog, {"ev_1", "ev_2"})

        assert [acc.id for acc in result.accounts] == ["ad_1", "ad_4"]
        assert len(result.rows) == 2
        assert len(result.columns) == 3

    def test_scenario_single_event(self, scenario_catalog: Catalog) -> None:
        result = recompute(scenario_catalog, {"ev_2"})

        assert [acc.id for acc in result.accounts] == ["ad_4"]
        assert len(result.rows) == 1
        assert result.rows[0].cells[0].debit_text == "$amt"

    def test_rows_follow_catalog_order(self, catalog: Catalog) -> None:
        """선택 순서와 무관하게 카탈로그 순서"""
        result = recompute(catalog, ["ev_2", "ev_1"])
        assert [row.event.id for row in result.rows] == ["ev_1", "ev_2"]

    def test_unknown_ids_ignored(self, catalog: Catalog) -> None:
        result = recompute(catalog, {"ev_2", "ev_404"})
        assert [row.event.id for row in result.rows] == ["ev_2"]

    def test_idempotent(self, catalog: Catalog) -> None:
        """동일 입력 → 동일 출력"""
        index = FormulaIndex.build(catalog.formulas)
        first = recompute(catalog, {"ev_1", "ev_3"}, index)
        second = recompute(catalog, {"ev_1", "ev_3"}, index)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_builds_index_when_missing(self, catalog: Catalog) -> None:
        bad = replace(
            catalog,
            formulas=catalog.formulas + (Formula("ev_1", "ad_1", "debit", "$ga"),),
        )
        with pytest.raises(DuplicateFormulaError):
            recompute(bad, {"ev_1"})

    def test_records_use_labels(self, scenario_catalog: Catalog) -> None:
        result = recompute(
            scenario_catalog, {"ev_2"}, labels=DirectionLabels(debit="Dr ", credit="Cr ")
        )
        assert result.records() == [
            {"_event": "Statement", "ad_4_debit": "Dr $amt", "ad_4_credit": ""}
        ]

    def test_to_dict_shape(self, scenario_catalog: Catalog) -> None:
        data = recompute(scenario_catalog, {"ev_2"}).to_dict()

        assert data["accounts"] == [
            {"id": "ad_4", "address": "card_receivables/$is_bnpl", "params": ["$is_bnpl"]}
        ]
        assert data["rows"][0]["header"]["kind"] == "event_summary"
        assert data["rows"][0]["cells"][0]["debit"] == {"kind": "text", "value": "D $amt"}


class TestProjectionPipeline:
    """ProjectionPipeline 테스트"""

    def test_validates_on_construction(self, catalog: Catalog) -> None:
        bad = replace(
            catalog,
            formulas=catalog.formulas + (Formula("ev_9", "ad_1", "debit", "$x"),),
        )
        with pytest.raises(UnknownReferenceError):
            ProjectionPipeline(bad)

    def test_skip_validation(self, catalog: Catalog) -> None:
        """validate=False면 참조 검증 생략 (중복 키는 여전히 검출)"""
        loose = replace(
            catalog,
            formulas=catalog.formulas + (Formula("ev_9", "ad_1", "debit", "$x"),),
        )
        pipeline = ProjectionPipeline(loose, validate=False)
        assert len(pipeline.index) == 9

    def test_index_reused(self, catalog: Catalog) -> None:
        pipeline = ProjectionPipeline(catalog)
        index = pipeline.index
        pipeline.run({"ev_1"})
        pipeline.run({"ev_2"})
        assert pipeline.index is index

    def test_latest_none_before_bind(self, catalog: Catalog) -> None:
        assert ProjectionPipeline(catalog).latest is None

    def test_bind_recomputes_on_selection_change(self, catalog: Catalog) -> None:
        pipeline = ProjectionPipeline(catalog)
        controller = SelectionController(catalog.events)

        initial = pipeline.bind(controller)
        assert len(initial.rows) == 3
        assert pipeline.latest is initial

        controller.set_active({"ev_2"})
        assert [row.event.id for row in pipeline.latest.rows] == ["ev_2"]
        assert [acc.id for acc in pipeline.latest.accounts] == ["ad_1", "ad_4"]

        controller.reset()
        assert len(pipeline.latest.rows) == 3

    def test_unbind_stops_recompute(self, catalog: Catalog) -> None:
        pipeline = ProjectionPipeline(catalog)
        controller = SelectionController(catalog.events)
        pipeline.bind(controller)

        pipeline.unbind()
        controller.set_active({"ev_2"})

        assert not pipeline.is_bound
        assert len(pipeline.latest.rows) == 3

    def test_rebind_releases_previous_controller(self, catalog: Catalog) -> None:
        pipeline = ProjectionPipeline(catalog)
        first = SelectionController(catalog.events)
        second = SelectionController(catalog.events)
        pipeline.bind(first)
        pipeline.bind(second)

        first.set_active({"ev_1"})
        assert len(pipeline.latest.rows) == 3

        second.set_active({"ev_2"})
        assert [row.event.id for row in pipeline.latest.rows] == ["ev_2"]


class TestPipelineConcurrency:
    """동시 선택 변경 시 latest 일관성"""

    def test_latest_matches_controller_after_overlapping_writers(self, catalog: Catalog) -> None:
        """먼저 시작한 쓰기의 재계산이 늦게 끝나도 latest는 최종 선택 기준"""
        controller = SelectionController(catalog.events)
        entered = threading.Event()
        release = threading.Event()

        def hold_first(active: frozenset[str]) -> None:
            if not entered.is_set():
                entered.set()
                release.wait(timeout=5)

        # 지연 구독자를 먼저 등록해 파이프라인 재계산이 그 뒤에 실행되도록 함
        controller.subscribe(hold_first)
        pipeline = ProjectionPipeline(catalog)
        pipeline.bind(controller)

        writer_a = threading.Thread(target=controller.set_active, args=({"ev_1"},))
        writer_b = threading.Thread(target=controller.set_active, args=({"ev_2"},))
        writer_a.start()
        assert entered.wait(timeout=5)
        writer_b.start()
        writer_b.join(timeout=0.2)
        release.set()
        writer_a.join(timeout=5)
        writer_b.join(timeout=5)

        expected = [ev.id for ev in controller.active_events()]
        assert expected == ["ev_2"]
        assert [row.event.id for row in pipeline.latest.rows] == expected

    def test_many_writers(self, catalog: Catalog) -> None:
        controller = SelectionController(catalog.events)
        pipeline = ProjectionPipeline(catalog)
        pipeline.bind(controller)
        choices = [{"ev_1"}, {"ev_2", "ev_3"}, set()]

        def writer(ids: set[str]) -> None:
            for _ in range(100):
                controller.set_active(ids)

        threads = [threading.Thread(target=writer, args=(c,)) for c in choices]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert [row.event.id for row in pipeline.latest.rows] == [
            ev.id for ev in controller.active_events()
        ]
