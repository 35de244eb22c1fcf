from abc import ABC, abstractmethod
from typing import List

from core.domain.models.corp_info import CorpInfo


class CorpCodePort(ABC):
    """기업 고유번호 목록 조회를 위한 포트 인터페이스.

    서비스 레이어는 이 인터페이스에만 의존하고, 실제 구현(어댑터)은
    이 인터페이스를 구현한다. 이를 통해 도메인(서비스)은 어댑터가
    목록을 어디서 어떻게 받아오는지 알 필요가 없다.
    """

    @abstractmethod
    def fetch_all(self) -> List[CorpInfo]:
        """등록된 전체 기업 목록을 반환한다.

        구현체는 예외를 던지지 않는다. 조회에 실패하면 로그를 남기고
        빈 리스트를 반환한다.

        Returns:
            List[CorpInfo]: 원본 문서 순서를 유지한 기업 목록.
        """
        raise NotImplementedError
