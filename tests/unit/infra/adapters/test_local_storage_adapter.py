"""Local Storage Adapter 테스트."""

from pathlib import Path
import pytest

from core.domain.models.corp_info import CorpInfo
from core.domain.models.financial_statement import ReportInfo
from infra.adapters.local_storage_adapter import LocalStorageAdapter


@pytest.fixture
def adapter(tmp_path):
    """테스트용 어댑터 인스턴스."""
    return LocalStorageAdapter(output_dir=tmp_path / "output", ensure_dir=True)


def test_save_corp_list_writes_header_and_rows(adapter, tmp_path):
    """기업 목록 CSV 저장 테스트."""
    # Arrange
    corps = [
        CorpInfo("00126380", "Samsung Electronics", "005930", "20230101"),
        CorpInfo("00434003", "다코", "", "20170630"),
    ]

    # Act
    file_path = adapter.save_corp_list(corps)

    # Assert
    assert file_path == tmp_path / "output" / "all_corp_codes.csv"
    lines = file_path.read_text(encoding="utf-8").split("\n")
    assert lines[0] == "corp_code,corp_name,stock_code,modify_date"
    assert lines[1] == "00126380,Samsung Electronics,005930,20230101"
    assert lines[2] == "00434003,다코,,20170630"


def test_save_corp_list_quotes_embedded_delimiters(adapter):
    """쉼표/따옴표가 들어간 값은 CSV 규칙대로 감싼다."""
    corps = [CorpInfo("00000001", 'Foo, "Bar" Inc', "", "")]

    file_path = adapter.save_corp_list(corps)

    lines = file_path.read_text(encoding="utf-8").split("\n")
    assert lines[1] == '00000001,"Foo, ""Bar"" Inc",,'


def test_save_financial_reports_path_and_header(adapter, tmp_path):
    """재무정보 CSV는 사업연도를 파일명에 쓴다."""
    reports = [
        ReportInfo(
            corp_code="00126380",
            corp_name="Samsung Electronics",
            bsns_year="2023",
            fs_div="CFS",
            oprt_prfit="1000000",
        )
    ]

    file_path = adapter.save_financial_reports(reports, "2023")

    assert file_path == tmp_path / "output" / "financial_reports_2023.csv"
    lines = file_path.read_text(encoding="utf-8").split("\n")
    assert lines[0] == (
        "corp_code,corp_name,biz_repr,bsns_year,fs_div,stock_code,oprt_prfit,thstrm_ntic,fncl_totasset"
    )
    assert lines[1] == "00126380,Samsung Electronics,,2023,CFS,,1000000,,"


def test_save_overwrites_and_is_byte_identical(adapter):
    """같은 입력을 두 번 저장하면 파일 내용이 동일하다."""
    corps = [CorpInfo("00126380", "Samsung Electronics", "005930", "20230101")]

    first = adapter.save_corp_list(corps).read_bytes()
    second = adapter.save_corp_list(corps).read_bytes()

    assert first == second


def test_save_empty_list_writes_header_only(adapter):
    """빈 목록은 헤더만 기록한다."""
    file_path = adapter.save_corp_list([])

    assert file_path.read_text(encoding="utf-8") == "corp_code,corp_name,stock_code,modify_date\n"


def test_auto_create_directory(tmp_path):
    """디렉터리 자동 생성 테스트."""
    # Arrange
    adapter = LocalStorageAdapter(output_dir=tmp_path / "subdir" / "nested", ensure_dir=True)

    # Act
    file_path = adapter.save_corp_list([CorpInfo("00000001", "A")])

    # Assert
    assert file_path.exists(), "중첩 디렉터리가 자동 생성되고 파일이 저장되어야 합니다"


def test_write_error_propagates(tmp_path):
    """쓰기 오류는 호출자에게 전달된다."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    adapter = LocalStorageAdapter(output_dir=blocker / "output", ensure_dir=True)

    with pytest.raises(OSError):
        adapter.save_corp_list([CorpInfo("00000001", "A")])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
