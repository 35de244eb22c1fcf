"""어댑터 통합 테스트.

여러 어댑터가 함께 작동하는지 검증합니다.
- CorpCodeAdapter + LocalStorageAdapter + LocalFileReaderAdapter + DartFinancialAdapter
- 실제 DART API 호출
"""

import os
import pytest

from infra.adapters.corp_code_adapter import CorpCodeAdapter
from infra.adapters.dart_financial_adapter import DartFinancialAdapter
from infra.adapters.local_file_reader_adapter import LocalFileReaderAdapter
from infra.adapters.local_storage_adapter import LocalStorageAdapter

SAMSUNG_CODE = "00126380"


@pytest.fixture(scope="module")
def api_key():
    api_key = os.getenv("DART_API_KEY")
    if not api_key:
        pytest.skip("DART_API_KEY 환경변수가 설정되지 않았습니다")
    return api_key


@pytest.fixture(scope="module")
def corp_list(api_key):
    """전체 기업 목록 (모듈 내 1회 다운로드)."""
    return CorpCodeAdapter(api_key=api_key).fetch_all()


def test_fetch_corp_list(corp_list):
    """Step 1: 고유번호 목록 다운로드 테스트."""
    assert len(corp_list) > 1000, "등록 기업이 충분히 조회되어야 합니다"
    assert all(corp.corp_code and corp.corp_name for corp in corp_list)
    assert SAMSUNG_CODE in {corp.corp_code for corp in corp_list}


def test_save_and_read_corp_list(corp_list, tmp_path):
    """Step 2: CSV 저장 후 다시 읽기."""
    # Arrange
    LocalStorageAdapter(tmp_path).save_corp_list(corp_list)

    # Act
    pairs = LocalFileReaderAdapter(tmp_path).read_corp_list()

    # Assert
    assert pairs == [(corp.corp_code, corp.corp_name) for corp in corp_list]


def test_fetch_samsung_reports(api_key):
    """Step 3: 삼성전자 2023년 재무정보 조회."""
    # Act
    reports = DartFinancialAdapter(api_key=api_key).get_reports(SAMSUNG_CODE, "2023", "삼성전자")

    # Assert
    print(f"\n조회 항목: {reports[:2]}")
    assert reports, "재무정보를 조회해야 합니다"
    assert all(report.corp_name for report in reports)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
