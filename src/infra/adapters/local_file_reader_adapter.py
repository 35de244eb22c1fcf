"""로컬 파일 시스템 파일 읽기 어댑터."""

import logging
from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

from core.ports.file_reader_port import FileReaderPort
from infra.adapters.local_storage_adapter import CORP_LIST_FILENAME, DEFAULT_OUTPUT_DIR

logger = logging.getLogger(__name__)


class LocalFileReaderAdapter(FileReaderPort):
    """로컬 파일 시스템에서 저장된 기업 목록 CSV를 읽는 어댑터."""

    def __init__(self, output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR):
        self._file_path = Path(output_dir) / CORP_LIST_FILENAME

    def read_corp_list(self) -> List[Tuple[str, str]]:
        """기업 목록 CSV의 첫 두 컬럼을 (기업코드, 기업명)으로 읽어옵니다.

        Returns:
            (기업코드, 기업명) 리스트. 기업코드가 빈 행은 제외.
        """
        if not self._file_path.exists():
            logger.warning(f"기업 목록 파일을 찾을 수 없습니다: {self._file_path}")
            return []

        # 모든 값을 문자열로 읽어 기업코드 앞자리 0을 보존
        try:
            df = pd.read_csv(self._file_path, dtype=str, keep_default_na=False, encoding="utf-8")
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
            logger.error(f"기업 목록 파일 읽기 실패: {e}")
            return []

        corps = []
        has_name = df.shape[1] > 1
        for row in df.itertuples(index=False, name=None):
            code = _clean_cell(row[0])
            if not code:
                continue
            name = _clean_cell(row[1]) if has_name else ""
            corps.append((code, name))
        return corps


def _clean_cell(value) -> str:
    """빈 문자열, 'null' 문자열, 누락값(NaN)을 빈 문자열로 취급."""
    if not isinstance(value, str):
        return ""
    text = value.strip()
    if text.lower() == "null":
        return ""
    return text
