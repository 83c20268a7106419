"""Unit tests for the firmware keyword predicate."""

import pytest

from filters import FirmwareKeywordFilter, FIRMWARE_KEYWORDS
from models import UpdateRecord


@pytest.mark.unit
class TestFirmwareKeywordFilter:
    """Test title matching."""

    @pytest.mark.parametrize("title", [
        "Dell System Firmware 1.12.0",
        "2024-09 BIOS Update for Model X",
        "Lenovo uefi capsule",
        "Embedded Controller update",
        "Intel Management Engine Interface",
        "HP FIRMWARE package",
    ])
    def test_matches_firmware_titles(self, title):
        """Test each default keyword matches regardless of case."""
        assert FirmwareKeywordFilter().is_firmware(title)

    @pytest.mark.parametrize("title", [
        "Realtek Audio Driver 6.0.9",
        "Intel Corporation - Display - 31.0.101.4502",
        "",
        None,
    ])
    def test_rejects_other_titles(self, title):
        """Test non-firmware titles do not match."""
        assert not FirmwareKeywordFilter().is_firmware(title)

    def test_match_returns_first_keyword(self):
        """Test matching stops at the first keyword in list order."""
        keyword_filter = FirmwareKeywordFilter()

        assert keyword_filter.match("System Firmware with BIOS") == "firmware"

    def test_literal_matching(self):
        """Test keywords are compared literally, not as patterns."""
        keyword_filter = FirmwareKeywordFilter(["EC (v2)", "fw.*"])

        assert keyword_filter.match("Contoso EC (v2) update") == "EC (v2)"
        assert keyword_filter.match("fw.bin") is None
        assert keyword_filter.match("fw.* pack") == "fw.*"

    def test_blank_keywords_ignored(self):
        """Test empty keywords do not match everything."""
        keyword_filter = FirmwareKeywordFilter(["", "  ", "BIOS"])

        assert keyword_filter.get_all_keywords() == ["BIOS"]
        assert not keyword_filter.is_firmware("Audio driver")

    def test_default_keywords(self):
        assert FirmwareKeywordFilter().get_all_keywords() == FIRMWARE_KEYWORDS

    def test_filter_preserves_order(self):
        """Test filter keeps source order of matching items."""
        items = [
            UpdateRecord(title="UEFI A"),
            UpdateRecord(title="Audio driver"),
            UpdateRecord(title="BIOS B"),
            UpdateRecord(title="Firmware C"),
        ]

        result = FirmwareKeywordFilter().filter(items)

        assert [item.title for item in result] == ["UEFI A", "BIOS B", "Firmware C"]
