"""DART API 응답 파싱 유틸리티."""

import logging
from typing import Any, Dict, List

from core.domain.models.financial_statement import ReportInfo
from core.services.report_normalization_service import ReportNormalizationService

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "000"


class DartResponseParser:
    """DART API 응답을 도메인 모델로 변환하는 파서.

    ``fnltt_lssum.json`` 의 JSON 응답을 ReportInfo 리스트로 변환합니다.
    """

    @staticmethod
    def parse_reports(
        response_data: Any,
        corp_code: str,
        year: str,
        normalizer: ReportNormalizationService,
        fallback_corp_name: str = ""
    ) -> List[ReportInfo]:
        """API 응답을 ReportInfo 리스트로 변환.

        Args:
            response_data: DART API 응답 데이터 (JSON 디코딩 결과)
            corp_code: 기업 코드 (로그용)
            year: 사업 연도 (로그용)
            normalizer: 필드 정규화 서비스
            fallback_corp_name: 응답에 회사명이 없을 때 사용할 기업명

        Returns:
            파싱된 항목 리스트, 실패하거나 데이터가 없으면 빈 리스트
        """
        if not isinstance(response_data, dict):
            logger.warning(f"Unexpected response body - corp_code={corp_code}, year={year}")
            return []

        # 상태 코드 확인
        if not DartResponseParser._is_valid_response(response_data, corp_code):
            return []

        # 데이터 항목 추출
        items = response_data.get("list")
        if not isinstance(items, list) or not items:
            logger.info(f"No data - corp_code={corp_code}, year={year}")
            return []

        return [
            normalizer.normalize(item, fallback_corp_name)
            for item in items
            if isinstance(item, dict)
        ]

    @staticmethod
    def _is_valid_response(data: Dict[str, Any], corp_code: str) -> bool:
        """응답 유효성 검증.

        Args:
            data: DART API 응답 데이터
            corp_code: 기업 코드 (로그용)

        Returns:
            유효하면 True, 아니면 False
        """
        status = data.get("status")
        if status != SUCCESS_STATUS:
            logger.warning(
                f"API Error - corp_code={corp_code}, Status: {status}, Message: {data.get('message', 'N/A')}"
            )
            return False
        return True
