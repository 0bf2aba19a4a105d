#!/usr/bin/env python3
"""
그리드 출력 스크립트

카탈로그를 로드해 이벤트 × 계정 그리드를 콘솔에 출력.

실행 방법:
    python scripts/print_grid.py
    python scripts/print_grid.py --events ev_1,ev_2
    python scripts/print_grid.py --catalog config/catalog.yaml --csv out.csv
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from core.catalog.errors import CatalogError
from core.config.loader import CatalogLoadError, get_settings, load_catalog
from core.logging import setup_logging
from core.projection.export import grid_to_frame
from core.projection.pipeline import ProjectionPipeline
from core.selection.controller import SelectionController


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="이벤트 × 계정 분개 규칙 그리드 출력")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="카탈로그 YAML 경로 (기본: settings.yaml의 catalog_path)",
    )
    parser.add_argument(
        "--events",
        type=str,
        default=None,
        help="활성 이벤트 ID (콤마 구분, 기본: 전체)",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="CSV로 저장할 경로",
    )
    parser.add_argument(
        "--list-events",
        action="store_true",
        help="이벤트 옵션 목록만 출력",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    setup_logging("cli", console_level=logging.WARNING)

    settings = get_settings()
    catalog_path = args.catalog or settings.catalog_path

    try:
        catalog = load_catalog(catalog_path)
        pipeline = ProjectionPipeline(catalog, labels=settings.labels)
    except (CatalogLoadError, CatalogError) as e:
        print(f"카탈로그 오류: {e}", file=sys.stderr)
        return 1

    controller = SelectionController(catalog.events)

    if args.list_events:
        for option in controller.event_options():
            print(f"{option.id}\t{option.display_label}")
        return 0

    pipeline.bind(controller)
    if args.events:
        controller.set_active(e.strip() for e in args.events.split(",") if e.strip())

    result = pipeline.latest
    assert result is not None
    frame = grid_to_frame(result)

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(frame)

    if args.csv:
        frame.to_csv(args.csv, encoding="utf-8")
        print(f"\nCSV 저장: {args.csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
