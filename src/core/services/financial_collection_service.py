"""기업 목록 및 재무정보 수집 총괄 서비스."""

import time
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from core.ports.corp_code_port import CorpCodePort
from core.ports.file_reader_port import FileReaderPort
from core.ports.financial_statement_port import FinancialStatementPort
from core.ports.storage_port import StoragePort
from core.domain.models.corp_info import CorpInfo
from core.domain.models.financial_statement import ReportInfo, ReportType

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_DELAY = 0.5  # 기업 간 요청 간격 (초)

T = TypeVar("T")


@dataclass(frozen=True)
class CollectionResult(Generic[T]):
    """수집 결과와 실제로 저장된 파일 경로 (저장하지 않았으면 None)."""
    records: List[T] = field(default_factory=list)
    output_path: Optional[Path] = None


class FinancialCollectionService:
    """기업 목록 수집과 재무정보 수집을 총괄하는 서비스.

    - 1단계: 전체 기업 고유번호 목록을 받아 CSV로 저장
    - 2단계: 저장된 목록을 읽어 기업별로 재무정보를 순차 조회하고 CSV로 저장
    - 기업 간에는 고정 간격으로 대기 (재시도 없음)
    """

    def __init__(
        self,
        corp_code_port: CorpCodePort,
        financial_port: FinancialStatementPort,
        storage_port: StoragePort,
        file_reader: FileReaderPort,
        request_delay: float = DEFAULT_REQUEST_DELAY
    ):
        self._corp_code_port = corp_code_port
        self._financial_port = financial_port
        self._storage_port = storage_port
        self._file_reader = file_reader
        self._request_delay = request_delay

    def collect_corp_codes(self) -> CollectionResult[CorpInfo]:
        """전체 기업 목록을 수집하고 저장합니다.

        목록이 비어 있으면 (조회 실패 포함) 파일을 쓰지 않습니다.

        Returns:
            수집된 기업 목록과 저장 경로
        """
        logger.info("기업 고유번호 목록 조회 중...")
        corps = self._corp_code_port.fetch_all()
        if not corps:
            logger.warning("조회된 기업 목록이 없습니다.")
            return CollectionResult()

        logger.info(f"기업 {len(corps)}곳 조회 완료")
        output_path = self._storage_port.save_corp_list(corps)
        return CollectionResult(corps, output_path)

    def collect_reports(self, year: str) -> CollectionResult[ReportInfo]:
        """저장된 기업 목록을 기준으로 재무정보를 수집하고 저장합니다.

        Args:
            year: 사업연도 (예: "2023")

        Returns:
            재무정보 항목 (기업 순회 순서 → API 응답 순서)과 저장 경로
        """
        corps = self._file_reader.read_corp_list()
        if not corps:
            logger.warning("재무정보를 조회할 기업 목록이 없습니다.")
            return CollectionResult()

        reports = self.fetch_reports(corps, year)
        if not reports:
            logger.warning(f"{year}년 수집된 재무정보가 없습니다.")
            return CollectionResult()

        output_path = self._storage_port.save_financial_reports(reports, year)
        return CollectionResult(reports, output_path)

    def fetch_reports(self, corps: Sequence[Tuple[str, str]], year: str) -> List[ReportInfo]:
        """기업별로 재무정보를 순차 조회합니다.

        한 기업의 실패는 다음 기업 조회에 영향을 주지 않습니다.

        Args:
            corps: (기업코드, 기업명) 리스트
            year: 사업연도
        """
        collected: List[ReportInfo] = []
        failed_count = 0
        total = len(corps)

        for idx, (code, name) in enumerate(corps, 1):
            logger.info(f"[{idx}/{total}] {name} ({code}) {year}년 재무정보 조회...")
            try:
                items = self._financial_port.get_reports(code, year, name, ReportType.ANNUAL)
            except Exception as e:
                logger.error(f"{name} ({code}) 재무정보 조회 중 오류 발생: {e}")
                items = []

            if items:
                collected.extend(items)
            else:
                failed_count += 1

            time.sleep(self._request_delay)

        logger.info(f"재무정보 {len(collected)}건 수집 (데이터 없음/실패 기업 {failed_count}곳)")
        return collected
