"""로컬 파일 시스템 저장 어댑터."""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from core.domain.models.corp_info import CorpInfo
from core.domain.models.financial_statement import ReportInfo
from core.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("output")
CORP_LIST_FILENAME = "all_corp_codes.csv"

CORP_COLUMNS = ["corp_code", "corp_name", "stock_code", "modify_date"]
REPORT_COLUMNS = [
    "corp_code",
    "corp_name",
    "biz_repr",
    "bsns_year",
    "fs_div",
    "stock_code",
    "oprt_prfit",
    "thstrm_ntic",
    "fncl_totasset",
]


def report_filename(year: str) -> str:
    """사업연도별 재무정보 파일명."""
    return f"financial_reports_{year}.csv"


class LocalStorageAdapter(StoragePort):
    """로컬 파일 시스템에 CSV로 저장하는 어댑터.

    - pandas를 사용한 UTF-8 CSV 생성 (헤더 1행 + 레코드 순서 유지)
    - 같은 경로의 파일은 덮어쓴다
    - 쓰기 오류는 잡지 않고 호출자에게 전달한다
    """

    def __init__(self, output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR, ensure_dir: bool = True):
        """초기화.

        Args:
            output_dir: CSV를 저장할 디렉터리
            ensure_dir: True이면 저장 전 디렉터리 자동 생성
        """
        self._output_dir = Path(output_dir)
        self._ensure_dir = ensure_dir

    def save_corp_list(self, corps: Sequence[CorpInfo]) -> Path:
        """기업 목록을 ``all_corp_codes.csv`` 로 저장."""
        file_path = self._output_dir / CORP_LIST_FILENAME
        self._write_csv([asdict(corp) for corp in corps], CORP_COLUMNS, file_path)
        return file_path

    def save_financial_reports(self, reports: Sequence[ReportInfo], year: str) -> Path:
        """재무정보를 ``financial_reports_<year>.csv`` 로 저장."""
        file_path = self._output_dir / report_filename(year)
        self._write_csv([asdict(report) for report in reports], REPORT_COLUMNS, file_path)
        return file_path

    def _write_csv(self, rows: list, columns: list, file_path: Path) -> None:
        # 디렉터리 생성
        if self._ensure_dir:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(rows, columns=columns, dtype=str)
        df.to_csv(file_path, index=False, encoding="utf-8", lineterminator="\n")
        logger.info(f"CSV 저장 완료: {file_path} ({len(df)}건)")
