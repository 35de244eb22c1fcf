"""재무정보 응답 정규화 서비스."""

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.domain.models.financial_statement import ReportInfo


DEFAULT_FIELD_CANDIDATES: Dict[str, List[str]] = {
    "corp_code": ["corp_code"],
    "corp_name": ["corp_name"],
    "biz_repr": ["biz_repr", "bsns_repr", "reprt_nm"],
    "bsns_year": ["bsns_year"],
    "fs_div": ["fs_div"],
    "stock_code": ["stock_code"],
    "oprt_prfit": ["oprt_prfit", "oprt_prft", "op_prfit"],
    "thstrm_ntic": ["thstrm_ntic", "thstrm_ntic_amount", "ntic"],
    "fncl_totasset": ["fncl_totasset", "fncl_tot_asset", "totasset"],
}


def resolve(record: Mapping[str, Any], candidates: Sequence[str], fallback: str = "") -> str:
    """후보 키를 순서대로 조회해 처음으로 비어 있지 않은 값을 반환.

    값은 문자열로 변환 후 앞뒤 공백을 제거한다. 어떤 후보도 값이 없으면
    ``fallback`` 을 반환한다.

    Args:
        record: 원본 레코드 (JSON 객체)
        candidates: 시도할 키 이름 목록
        fallback: 모든 후보가 비었을 때의 값

    Returns:
        정규화된 문자열 (None 없음)
    """
    for key in candidates:
        value = record.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return fallback


class ReportNormalizationService:
    """DART 재무정보 항목을 ReportInfo로 정규화하는 서비스.
    
    - 필드별 키 후보 목록은 TOML 설정 파일에서 로드
    - 설정 파일이 없거나 일부 필드가 빠져 있으면 기본 후보 사용
    """

    def __init__(self, config_path: Optional[str] = None):
        """초기화.
        
        Args:
            config_path: 필드 후보 설정 파일 경로 (TOML 형식).
                        None이면 기본 경로 사용: config/report_fields.toml
        """
        if config_path is None:
            # 프로젝트 루트에서 config 디렉토리 찾기
            current_file = Path(__file__)
            project_root = current_file.parent.parent.parent.parent
            config_path = project_root / "config" / "report_fields.toml"
        else:
            config_path = Path(config_path)

        self.field_candidates: Dict[str, List[str]] = {
            name: list(keys) for name, keys in DEFAULT_FIELD_CANDIDATES.items()
        }

        if config_path.exists():
            with open(config_path, "rb") as f:
                config = tomllib.load(f)

            fields = config.get("report_fields", {})
            for name in DEFAULT_FIELD_CANDIDATES:
                keys = fields.get(name)
                if keys:
                    self.field_candidates[name] = [str(key) for key in keys]

    def normalize(self, item: Mapping[str, Any], fallback_corp_name: str = "") -> ReportInfo:
        """JSON 항목 하나를 ReportInfo로 변환.
        
        Args:
            item: ``list`` 배열의 항목
            fallback_corp_name: 항목에 회사명이 없을 때 사용할 기업명
        """
        return ReportInfo(
            corp_code=self._resolve(item, "corp_code"),
            corp_name=self._resolve(item, "corp_name", fallback_corp_name),
            biz_repr=self._resolve(item, "biz_repr"),
            bsns_year=self._resolve(item, "bsns_year"),
            fs_div=self._resolve(item, "fs_div"),
            stock_code=self._resolve(item, "stock_code"),
            oprt_prfit=self._resolve(item, "oprt_prfit"),
            thstrm_ntic=self._resolve(item, "thstrm_ntic"),
            fncl_totasset=self._resolve(item, "fncl_totasset"),
        )

    def _resolve(self, item: Mapping[str, Any], field_name: str, fallback: str = "") -> str:
        return resolve(item, self.field_candidates[field_name], fallback)
