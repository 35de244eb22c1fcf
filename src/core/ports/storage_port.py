"""데이터 저장을 위한 포트 인터페이스."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from core.domain.models.corp_info import CorpInfo
from core.domain.models.financial_statement import ReportInfo


class StoragePort(ABC):
    """데이터 저장 포트."""

    @abstractmethod
    def save_corp_list(self, corps: Sequence[CorpInfo]) -> Path:
        """기업 목록을 저장하고 저장 경로를 반환.
        
        Args:
            corps: 저장할 기업 목록 (입력 순서대로 기록)
        """
        raise NotImplementedError

    @abstractmethod
    def save_financial_reports(self, reports: Sequence[ReportInfo], year: str) -> Path:
        """사업연도별 재무정보를 저장하고 저장 경로를 반환.
        
        Args:
            reports: 저장할 재무정보 항목
            year: 사업연도 (파일명에 사용)
        """
        raise NotImplementedError
