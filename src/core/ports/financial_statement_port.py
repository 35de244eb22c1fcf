"""재무정보 조회 포트 인터페이스."""

from abc import ABC, abstractmethod
from typing import List

from core.domain.models.financial_statement import ReportInfo, ReportType


class FinancialStatementPort(ABC):
    """재무정보 조회 포트."""

    @abstractmethod
    def get_reports(
        self,
        corp_code: str,
        year: str,
        corp_name: str = "",
        report_type: ReportType = ReportType.ANNUAL
    ) -> List[ReportInfo]:
        """단일 기업의 재무정보 항목 조회.
        
        Args:
            corp_code: 기업코드
            year: 사업연도 (예: "2023")
            corp_name: 응답에 회사명이 없을 때 채울 기업명
            report_type: 보고서 타입
        
        Returns:
            재무정보 항목 리스트 (실패하거나 데이터가 없으면 빈 리스트)
        """
        raise NotImplementedError
