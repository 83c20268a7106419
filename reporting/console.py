"""
펌웨어 업데이트 표 출력
"""

from typing import List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from models import UpdateRecord, HistoryEntry, FirmwareReport


class ConsoleReporter:
    """표준 출력용 리포트 출력기"""

    HEADERS = {
        "available": "Available Firmware Updates",
        "installed": "Installed Firmware Updates",
        "pending": "Firmware Updates Pending Download",
    }

    EMPTY_MESSAGES = {
        "available": "No firmware updates available.",
        "installed": "No firmware updates installed.",
        "pending": "No firmware updates pending download.",
    }

    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, console: Console = None):
        self.console = console or Console(highlight=False)

    def print_report(self, report: FirmwareReport) -> None:
        """세 구역 모두 출력 (설치 가능 → 설치됨 → 다운로드 대기)"""
        self.print_available(report.available)
        self.print_installed(report.installed)
        self.print_pending(report.pending)

    def print_available(self, updates: List[UpdateRecord]) -> None:
        table = None
        if updates:
            table = self._make_table("Title", "KB", "Classification", "Downloaded")
            for update in updates:
                table.add_row(
                    Text(update.title),
                    Text(update.kb_display),
                    Text(update.classification),
                    "Yes" if update.is_downloaded else "No",
                )
        self._print_section("available", table)

    def print_installed(self, history: List[HistoryEntry]) -> None:
        table = None
        if history:
            table = self._make_table("Date", "Title", "Result")
            for entry in history:
                table.add_row(
                    entry.date.strftime(self.DATE_FORMAT),
                    Text(entry.title),
                    Text(entry.result),
                )
        self._print_section("installed", table)

    def print_pending(self, updates: List[UpdateRecord]) -> None:
        table = None
        if updates:
            table = self._make_table("Title", "KB", "Classification")
            for update in updates:
                table.add_row(
                    Text(update.title),
                    Text(update.kb_display),
                    Text(update.classification),
                )
        self._print_section("pending", table)

    def _make_table(self, *columns: str) -> Table:
        table = Table(box=box.SIMPLE_HEAD, show_edge=False)
        for column in columns:
            table.add_column(column)
        return table

    def _print_section(self, key: str, table: Table = None) -> None:
        """헤더 + 표, 항목이 없으면 안내 메시지"""
        self.console.print(Text(f"=== {self.HEADERS[key]} ===", style="bold"))
        if table is None:
            self.console.print(Text(self.EMPTY_MESSAGES[key]))
        else:
            self.console.print(table)
        self.console.print()
