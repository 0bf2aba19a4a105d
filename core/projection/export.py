"""
그리드 DataFrame 변환

GridResult를 2단 컬럼(계정 주소 × D/C) DataFrame으로 변환.
스크립트 출력/CSV 내보내기용.
"""

import pandas as pd

from core.projection.grid import credit_column_id, debit_column_id
from core.projection.pipeline import GridResult


def grid_to_frame(result: GridResult) -> pd.DataFrame:
    """GridResult → DataFrame

    index: 이벤트 이름, columns: (계정 주소, 방향) MultiIndex.
    빈 셀은 빈 문자열.

    Args:
        result: 파이프라인 결과

    Returns:
        pd.DataFrame: 행 = 활성 이벤트, 열 = 계정별 D/C
    """
    debit_header, credit_header = result.labels.headers()

    columns = pd.MultiIndex.from_tuples(
        [
            (acc.address_template, header)
            for acc in result.accounts
            for header in (debit_header, credit_header)
        ],
        names=["account", "side"],
    )

    data = [
        [
            record[column_id(acc.id)]
            for acc in result.accounts
            for column_id in (debit_column_id, credit_column_id)
        ]
        for record in result.records()
    ]

    return pd.DataFrame(
        data,
        index=pd.Index([row.event.name for row in result.rows], name="event"),
        columns=columns,
    )
