"""CLI 인터페이스."""

import sys
import logging
from pathlib import Path

import typer
from rich.console import Console

# src 디렉토리를 모듈 검색 경로에 추가
sys.path.append(str(Path(__file__).parent))

from core.services.financial_collection_service import FinancialCollectionService
from main import (
    DEFAULT_BSNS_YEAR,
    MISSING_KEY_MESSAGE,
    build_service,
    load_api_key,
    run_corp_codes,
    run_reports,
    setup_logging,
)

# Typer 앱 생성
app = typer.Typer(
    name="collector",
    help="DART 기업 고유번호 및 재무정보 수집 도구",
    add_completion=False
)

# Rich console
console = Console()

logger = logging.getLogger(__name__)


def _init_service() -> FinancialCollectionService:
    """API 키를 확인하고 서비스를 생성합니다. 키가 없으면 정상 종료."""
    setup_logging()
    api_key = load_api_key()
    if not api_key:
        console.print(f"[yellow]{MISSING_KEY_MESSAGE}[/yellow]")
        raise typer.Exit()
    return build_service(api_key)


@app.command("corp-codes")
def corp_codes():
    """전체 기업 고유번호 목록을 output/all_corp_codes.csv 로 저장합니다."""
    service = _init_service()
    try:
        run_corp_codes(service)
    except OSError as e:
        console.print(f"[red]❌ 저장 실패: {e}[/red]")
        logger.exception(f"기업 목록 저장 중 오류 발생: {e}")
        raise typer.Exit(code=1)


@app.command("reports")
def reports():
    """저장된 기업 목록으로 재무정보를 수집합니다.

    Examples:
        $ uv run collector corp-codes
        $ uv run collector reports
    """
    service = _init_service()
    try:
        run_reports(service, DEFAULT_BSNS_YEAR)
    except OSError as e:
        console.print(f"[red]❌ 저장 실패: {e}[/red]")
        logger.exception(f"재무정보 저장 중 오류 발생: {e}")
        raise typer.Exit(code=1)


@app.command("run")
def run():
    """기업 목록 수집 후 재무정보까지 한 번에 수집합니다."""
    service = _init_service()
    try:
        if not run_corp_codes(service):
            console.print("[yellow]기업 목록이 없어 재무정보 수집을 건너뜁니다.[/yellow]")
            return
        run_reports(service, DEFAULT_BSNS_YEAR)
        console.print("[green]✅ 완료![/green]")
    except OSError as e:
        console.print(f"[red]❌ 저장 실패: {e}[/red]")
        logger.exception(f"작업 중 치명적인 오류 발생: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
