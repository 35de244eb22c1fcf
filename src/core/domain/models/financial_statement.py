"""재무정보 도메인 모델 - 최소 정의."""

from dataclasses import dataclass
from enum import Enum


class ReportType(Enum):
    """보고서 타입 (DART ``reprt_code``).

    수집기는 사업보고서(ANNUAL)만 조회하지만, 재무정보 포트는
    ``report_type`` 인자로 다른 정기보고서도 요청할 수 있다.
    """
    ANNUAL = "11011"        # 사업보고서
    SEMI_ANNUAL = "11012"   # 반기보고서
    Q1 = "11013"            # 1분기보고서
    Q3 = "11014"            # 3분기보고서


@dataclass(frozen=True)
class ReportInfo:
    """기업 한 곳의 한 사업연도 재무정보 항목.

    모든 필드는 문자열이며 값이 없으면 빈 문자열이다 (``None`` 없음).
    금액 필드는 API가 내려준 문자열을 그대로 보관한다.
    """
    corp_code: str
    corp_name: str
    biz_repr: str = ""
    bsns_year: str = ""
    fs_div: str = ""           # 재무제표 구분 (CFS/OFS 등)
    stock_code: str = ""
    oprt_prfit: str = ""       # 영업이익
    thstrm_ntic: str = ""      # 당기순이익
    fncl_totasset: str = ""    # 자산총계
