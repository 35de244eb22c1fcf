"""DART API 재무정보 어댑터."""

import logging
import os
from typing import Dict, List, Optional

import requests

from core.domain.models.financial_statement import ReportInfo, ReportType
from core.ports.financial_statement_port import FinancialStatementPort
from core.services.report_normalization_service import ReportNormalizationService
from infra.adapters.dart_response_parser import DartResponseParser

logger = logging.getLogger(__name__)


class DartFinancialAdapter(FinancialStatementPort):
    """DART API를 통한 재무정보 조회 어댑터.

    - 요청 1회에 기업 1곳, 사업연도 1개를 조회
    - 실패는 로그만 남기고 빈 리스트로 반환 (재시도 없음)
    """

    _API_URL = "https://opendart.fss.or.kr/api/fnltt_lssum.json"

    def __init__(
        self,
        api_key: Optional[str] = None,
        normalizer: Optional[ReportNormalizationService] = None
    ):
        """초기화.

        Args:
            api_key: DART API 키 (None이면 환경변수에서 읽음)
            normalizer: 필드 정규화 서비스 (None이면 기본 설정 사용)
        """
        self._api_key = api_key or os.getenv("DART_API_KEY")
        if not self._api_key:
            raise EnvironmentError("DART_API_KEY가 설정되지 않았습니다.")
        self._normalizer = normalizer or ReportNormalizationService()

    def get_reports(
        self,
        corp_code: str,
        year: str,
        corp_name: str = "",
        report_type: ReportType = ReportType.ANNUAL
    ) -> List[ReportInfo]:
        """DART API 호출 및 파싱.

        파싱 로직은 DartResponseParser에 위임합니다.
        """
        params = self._build_api_params(corp_code, year, report_type)

        try:
            response = requests.get(self._API_URL, params=params, timeout=30)
            if response.status_code != 200:
                logger.warning(f"HTTP error - corp_code={corp_code}, status={response.status_code}")
                return []
            data = response.json()

        except (requests.RequestException, ValueError) as e:
            logger.error(f"재무정보 요청 실패 - corp_code={corp_code}: {e}")
            return []

        return DartResponseParser.parse_reports(
            data, corp_code, year, self._normalizer, fallback_corp_name=corp_name
        )

    def _build_api_params(
        self,
        corp_code: str,
        year: str,
        report_type: ReportType
    ) -> Dict[str, str]:
        """API 요청 파라미터 생성.

        Args:
            corp_code: 기업 코드
            year: 사업 연도
            report_type: 보고서 종류

        Returns:
            API 요청 파라미터 딕셔너리
        """
        return {
            "crtfc_key": self._api_key,
            "corp_code": corp_code,
            "bsns_year": str(year),
            "reprt_code": report_type.value,
        }
