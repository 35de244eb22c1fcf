"""메인 실행 스크립트."""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Sequence
from dotenv import load_dotenv

# src 디렉토리를 모듈 검색 경로에 추가
sys.path.append(str(Path(__file__).parent))

from core.domain.models.corp_info import CorpInfo
from core.domain.models.financial_statement import ReportInfo
from core.services.financial_collection_service import FinancialCollectionService
from core.services.report_normalization_service import ReportNormalizationService
from infra.adapters.corp_code_adapter import CorpCodeAdapter
from infra.adapters.dart_financial_adapter import DartFinancialAdapter
from infra.adapters.local_file_reader_adapter import LocalFileReaderAdapter
from infra.adapters.local_storage_adapter import DEFAULT_OUTPUT_DIR, LocalStorageAdapter

logger = logging.getLogger(__name__)

DEFAULT_BSNS_YEAR = "2023"
SAMPLE_SIZE = 5
MISSING_KEY_MESSAGE = "Missing DART_API_KEY. Please update the .env file with your API key."


def setup_logging() -> None:
    """경고/오류 로그는 stderr, 진행 상황 출력은 stdout."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def load_api_key() -> Optional[str]:
    """.env 를 로드하고 DART_API_KEY 를 반환 (없거나 비어 있으면 None)."""
    load_dotenv()
    api_key = (os.getenv("DART_API_KEY") or "").strip()
    return api_key or None


def build_service(api_key: str, output_dir: Path = DEFAULT_OUTPUT_DIR) -> FinancialCollectionService:
    """어댑터를 조립해 수집 서비스를 생성."""
    return FinancialCollectionService(
        corp_code_port=CorpCodeAdapter(api_key=api_key),
        financial_port=DartFinancialAdapter(api_key=api_key, normalizer=ReportNormalizationService()),
        storage_port=LocalStorageAdapter(output_dir),
        file_reader=LocalFileReaderAdapter(output_dir),
    )


def format_corp(corp: CorpInfo) -> str:
    return (
        f"- {corp.corp_name} (corp_code: {corp.corp_code}, stock_code: {corp.stock_code}, "
        f"modify_date: {corp.modify_date})"
    )


def format_report(report: ReportInfo) -> str:
    return (
        f"- {report.corp_name} (corp_code: {report.corp_code}, bsns_year: {report.bsns_year}, "
        f"fs_div: {report.fs_div}, oprt_prfit: {report.oprt_prfit}, "
        f"thstrm_ntic: {report.thstrm_ntic}, fncl_totasset: {report.fncl_totasset})"
    )


def run_corp_codes(service: FinancialCollectionService) -> Sequence[CorpInfo]:
    """1단계: 기업 고유번호 목록 수집."""
    print("Fetching corp codes from DART API...")
    result = service.collect_corp_codes()
    if not result.records:
        print("No corp codes retrieved from DART API.")
        return []

    print(f"Top {SAMPLE_SIZE} corporations:")
    for corp in result.records[:SAMPLE_SIZE]:
        print(format_corp(corp))
    print(f"Saved CSV to: {result.output_path}")
    return result.records


def run_reports(service: FinancialCollectionService, year: str = DEFAULT_BSNS_YEAR) -> Sequence[ReportInfo]:
    """2단계: 저장된 기업 목록 기준 재무정보 수집."""
    print(f"Fetching {year} financial reports from DART API...")
    result = service.collect_reports(year)
    if not result.records:
        print(f"No financial report data retrieved for {year}.")
        return []

    print(f"Top {SAMPLE_SIZE} financial report records:")
    for report in result.records[:SAMPLE_SIZE]:
        print(format_report(report))
    print(f"Saved CSV to: {result.output_path}")
    return result.records


def main():
    setup_logging()

    api_key = load_api_key()
    if not api_key:
        print(MISSING_KEY_MESSAGE)
        return

    service = build_service(api_key)

    if not run_corp_codes(service):
        return
    run_reports(service, DEFAULT_BSNS_YEAR)


if __name__ == "__main__":
    main()
