"""Local File Reader Adapter 테스트."""

import pytest

from core.domain.models.corp_info import CorpInfo
from infra.adapters.local_file_reader_adapter import LocalFileReaderAdapter
from infra.adapters.local_storage_adapter import LocalStorageAdapter


@pytest.fixture
def output_dir(tmp_path):
    directory = tmp_path / "output"
    directory.mkdir()
    return directory


def _write(output_dir, text):
    (output_dir / "all_corp_codes.csv").write_text(text, encoding="utf-8")


def test_round_trip_preserves_pairs_and_order(output_dir):
    """저장한 목록을 다시 읽으면 (코드, 이름) 쌍과 순서가 같다."""
    # Arrange
    corps = [
        CorpInfo("00126380", "Samsung Electronics", "005930", "20230101"),
        CorpInfo("00164779", "SK하이닉스", "000660", "20230102"),
        CorpInfo("00000001", 'Foo, "Bar" Inc', "", ""),
    ]
    LocalStorageAdapter(output_dir).save_corp_list(corps)

    # Act
    pairs = LocalFileReaderAdapter(output_dir).read_corp_list()

    # Assert
    assert pairs == [(c.corp_code, c.corp_name) for c in corps]


def test_missing_file_returns_empty(tmp_path):
    """파일이 없으면 빈 리스트."""
    assert LocalFileReaderAdapter(tmp_path / "nowhere").read_corp_list() == []


def test_null_and_empty_cells_are_absent(output_dir):
    """빈 문자열과 'null' (대소문자 무시) 은 값이 없는 것으로 본다."""
    _write(
        output_dir,
        "corp_code,corp_name,stock_code,modify_date\n"
        "00000001,NULL,,\n"
        ",No Code,,\n"
        "null,Null Code,,\n"
        "00000004,Kept,,\n",
    )

    pairs = LocalFileReaderAdapter(output_dir).read_corp_list()

    assert pairs == [("00000001", ""), ("00000004", "Kept")]


def test_single_column_file(output_dir):
    """기업명 컬럼이 없으면 이름은 빈 문자열."""
    _write(output_dir, "corp_code\n00126380\n00164779\n")

    pairs = LocalFileReaderAdapter(output_dir).read_corp_list()

    assert pairs == [("00126380", ""), ("00164779", "")]


def test_header_only_file_returns_empty(output_dir):
    """헤더만 있으면 빈 리스트."""
    _write(output_dir, "corp_code,corp_name,stock_code,modify_date\n")

    assert LocalFileReaderAdapter(output_dir).read_corp_list() == []


def test_empty_file_returns_empty(output_dir):
    """빈 파일은 오류 로그 후 빈 리스트."""
    _write(output_dir, "")

    assert LocalFileReaderAdapter(output_dir).read_corp_list() == []


def test_malformed_csv_returns_empty(output_dir):
    """파싱할 수 없는 CSV는 빈 리스트."""
    _write(output_dir, 'corp_code,corp_name\n00000001,"unterminated\n')

    assert LocalFileReaderAdapter(output_dir).read_corp_list() == []
