import io
import logging
import os
import zipfile
import zlib
import xml.etree.ElementTree as ET
from typing import List, Optional

import requests

from core.domain.models.corp_info import CorpInfo
from core.ports.corp_code_port import CorpCodePort

logger = logging.getLogger(__name__)


class CorpCodeAdapter(CorpCodePort):
    """DART 기업 고유번호 목록 어댑터.

    - DART에서 제공하는 ``corpCode.xml`` 응답(zip)을 메모리에서 바로 열어
      ``CORPCODE.xml`` 을 파싱한다.
    - 디스크 캐시는 두지 않는다. 매 호출마다 최신 목록을 내려받는다.
    - 어떤 실패든 로그를 남기고 빈 리스트를 반환하며 예외를 올리지 않는다.
    """

    _API_URL = "https://opendart.fss.or.kr/api/corpCode.xml"
    _XML_NAME = "CORPCODE.XML"

    def __init__(self, api_key: Optional[str] = None) -> None:
        """생성자.

        Args:
            api_key: DART API 키 (None이면 환경변수 ``DART_API_KEY`` 사용).
        """
        self._api_key = api_key or os.getenv("DART_API_KEY")
        if not self._api_key:
            raise EnvironmentError("DART_API_KEY 환경 변수가 설정되지 않았습니다.")

    # ---------------------------------------------------------------------
    # CorpCodePort 구현
    # ---------------------------------------------------------------------
    def fetch_all(self) -> List[CorpInfo]:
        """전체 기업 목록을 내려받아 반환한다."""
        try:
            response = requests.get(self._API_URL, params={"crtfc_key": self._api_key}, timeout=30)
            if response.status_code != 200:
                logger.error(f"기업 고유번호 조회 HTTP 오류: {response.status_code}")
                return []

            zip_bytes = response.content
            if not zip_bytes:
                logger.error("기업 고유번호 응답이 비어 있습니다.")
                return []

            xml_bytes = self._extract_xml(zip_bytes)
            if xml_bytes is None:
                logger.error("다운로드한 압축 파일에서 CORPCODE.xml 을 찾을 수 없습니다.")
                return []

            return self.parse_corp_xml(xml_bytes.decode("utf-8", errors="replace"))

        except (
            requests.RequestException,
            zipfile.BadZipFile,
            zlib.error,
            EOFError,
            RuntimeError,          # 암호화된 항목
            NotImplementedError,   # 지원하지 않는 압축 방식
            ET.ParseError,
        ) as e:
            logger.error(f"기업 고유번호 조회 실패: {e}")
            return []

    # ---------------------------------------------------------------------
    # 내부 헬퍼
    # ---------------------------------------------------------------------
    def _extract_xml(self, zip_bytes: bytes) -> Optional[bytes]:
        """zip 안에서 ``CORPCODE.xml`` (대소문자 무시) 을 읽는다.

        ``ZipFile.read`` 가 CRC를 검증하므로 손상된 항목은
        ``BadZipFile`` 로 올라온다.
        """
        with zipfile.ZipFile(io.BytesIO(zip_bytes)) as z:
            for info in z.infolist():
                if not info.is_dir() and info.filename.upper() == self._XML_NAME:
                    return z.read(info)
        return None

    @staticmethod
    def parse_corp_xml(xml_text: str) -> List[CorpInfo]:
        """XML 문자열에서 ``<list>`` 항목을 문서 순서대로 읽는다.

        기업코드나 기업명이 비어 있는 항목은 버린다.

        Args:
            xml_text: 디코딩된 CORPCODE.xml 본문.

        Returns:
            기업 목록.
        """
        root = ET.fromstring(xml_text)
        entries = list(root.iter("list"))
        if not entries:
            logger.warning("CORPCODE.xml 에 <list> 항목이 없습니다.")
            return []

        corps = []
        for corp in entries:
            info = CorpInfo(
                corp_code=_child_text(corp, "corp_code"),
                corp_name=_child_text(corp, "corp_name"),
                stock_code=_child_text(corp, "stock_code"),
                modify_date=_child_text(corp, "modify_date"),
            )
            if info.corp_code and info.corp_name:
                corps.append(info)
        return corps


def _child_text(element: ET.Element, tag: str) -> str:
    return (element.findtext(tag) or "").strip()
