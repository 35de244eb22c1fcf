"""파일 읽기를 위한 포트 인터페이스."""

from abc import ABC, abstractmethod
from typing import List, Tuple


class FileReaderPort(ABC):
    """파일 읽기를 위한 포트."""
    
    @abstractmethod
    def read_corp_list(self) -> List[Tuple[str, str]]:
        """저장된 기업 목록에서 (기업코드, 기업명) 쌍을 읽어옵니다.
        
        Returns:
            (기업코드, 기업명) 리스트. 파일이 없거나 읽기에 실패하면 빈 리스트.
        """
        raise NotImplementedError
