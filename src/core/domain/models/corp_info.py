"""기업 고유번호 도메인 모델."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CorpInfo:
    """DART 고유번호 파일(CORPCODE.xml)의 기업 한 건.

    ``corp_code`` 와 ``corp_name`` 이 비어 있는 항목은 파싱 단계에서 제외되므로
    이 객체로 만들어지지 않는다.
    """
    corp_code: str           # 고유번호 (8자리)
    corp_name: str           # 정식 회사명
    stock_code: str = ""     # 종목코드 (비상장사는 빈 문자열)
    modify_date: str = ""    # 최종변경일자 (YYYYMMDD, 원문 그대로)
