"""Tests for shared input checks."""

import pytest

from gearbook.core.entities.inventory import RepairStatus
from gearbook.core.entities.quote import QuoteType
from gearbook.core.exceptions import InvalidEnumError, InvalidStatusError, ValidationError
from gearbook.core.services.validation import parse_enum, require_min, require_text


class TestRequireText:
    def test_strips(self):
        assert require_text("name", "  Par 64 ") == "Par 64"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_rejected(self, value):
        with pytest.raises(ValidationError):
            require_text("name", value)


class TestRequireMin:
    def test_accepts_minimum(self):
        assert require_min("quantity", 1) == 1

    def test_rejects_below(self):
        with pytest.raises(ValidationError) as exc_info:
            require_min("quantity", 0)
        assert exc_info.value.details["field"] == "quantity"

    def test_custom_minimum(self):
        assert require_min("quantity", 0, minimum=0) == 0


class TestParseEnum:
    def test_valid(self):
        assert parse_enum(RepairStatus, "status", "repariert") == RepairStatus.REPAIRED

    def test_status_field_raises_invalid_status(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            parse_enum(RepairStatus, "status", "kaputt")
        assert "defekt" in exc_info.value.details["allowed"]

    def test_other_field_raises_invalid_enum(self):
        with pytest.raises(InvalidEnumError) as exc_info:
            parse_enum(QuoteType, "quote_type", "Mahnung")
        assert not isinstance(exc_info.value, InvalidStatusError)
