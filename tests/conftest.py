"""Shared fixtures: fake update service and fake Windows Update COM objects."""

import io
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from rich.console import Console

from collectors import UpdateServiceClient, UpdateServiceError
from models import UpdateRecord, HistoryEntry
from reporting import ConsoleReporter


class FakeUpdateClient(UpdateServiceClient):
    """In-memory update service; `fail_on` names the operation that raises."""

    def __init__(self, updates=None, history=None, fail_on=None):
        self.updates = list(updates or [])
        self.history = list(history or [])
        self.fail_on = fail_on
        self.calls = []

    @property
    def service_name(self):
        return "fake"

    def _record(self, name):
        self.calls.append(name)
        if self.fail_on == name:
            raise UpdateServiceError(f"{name} failed", ConnectionError("service unreachable"))

    def create_session(self):
        self._record("create_session")

    def search(self, criteria):
        self._record("search")
        self.criteria = criteria
        return list(self.updates)

    def get_history_count(self):
        self._record("get_history_count")
        return len(self.history)

    def query_history(self, offset, count):
        self._record("query_history")
        return self.history[offset:offset + count]


class FakeCollection:
    """COM-style collection exposing Count and Item(i)."""

    def __init__(self, items):
        self._items = list(items)

    @property
    def Count(self):
        return len(self._items)

    def Item(self, index):
        return self._items[index]


class FakeSearcher:
    def __init__(self, updates=None, history=None):
        self.updates = list(updates or [])
        self.history = list(history or [])
        self.criteria = None
        self.history_calls = []

    def Search(self, criteria):
        self.criteria = criteria
        return SimpleNamespace(Updates=FakeCollection(self.updates))

    def GetTotalHistoryCount(self):
        return len(self.history)

    def QueryHistory(self, offset, count):
        self.history_calls.append((offset, count))
        return FakeCollection(self.history[offset:offset + count])


class FakeSession:
    def __init__(self, searcher):
        self.searcher = searcher

    def CreateUpdateSearcher(self):
        return self.searcher


def make_com_update(title, kb_ids=(), categories=(("Drivers", "UpdateClassification"),),
                    downloaded=False, installed=False):
    return SimpleNamespace(
        Title=title,
        KBArticleIDs=FakeCollection(kb_ids),
        Categories=FakeCollection(SimpleNamespace(Name=n, Type=t) for n, t in categories),
        IsDownloaded=downloaded,
        IsInstalled=installed,
    )


def make_com_history(title, result_code=2, date=None):
    return SimpleNamespace(
        Title=title,
        ResultCode=result_code,
        Date=date or datetime(2024, 9, 12, 8, 30, 15, tzinfo=timezone.utc),
    )


@pytest.fixture
def string_console():
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def reporter(string_console):
    return ConsoleReporter(console=string_console)


@pytest.fixture
def bios_update():
    return UpdateRecord(
        title="2024-09 BIOS Update for Model X",
        kb_article_ids=[],
        classification="Drivers",
        is_downloaded=False,
    )


@pytest.fixture
def me_history_entry():
    return HistoryEntry(
        date=datetime(2024, 8, 1, 10, 15, 0),
        title="Intel Management Engine Firmware Update",
        result="Succeeded",
    )
