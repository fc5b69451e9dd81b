"""Tests for the adjustment metadata policy."""

import pytest

from src.photo_inverter.core.adjustment_data import (
    INVERSION_MARKER,
    AdjustmentData,
    build_adjustment_data,
    can_handle,
)
from src.photo_inverter.errors import AdjustmentDataError


def test_committed_record_is_a_bare_marker():
    record = build_adjustment_data()
    assert record.format_identifier == "se.lenborje.inverter"
    assert record.format_version == "1.0"
    assert record.payload() == INVERSION_MARKER
    assert "black" not in record.payload()


def test_prior_edits_are_never_resumed():
    assert can_handle(build_adjustment_data()) is False
    assert can_handle(AdjustmentData("com.example.other", "2.0", b"{}")) is False
    assert can_handle(None) is False


def test_to_dict_uses_host_field_names():
    assert build_adjustment_data().to_dict() == {
        "formatIdentifier": "se.lenborje.inverter",
        "formatVersion": "1.0",
        "payload": {"inversion": True},
    }


def test_empty_payload_is_reported_as_empty_mapping():
    record = AdjustmentData("se.lenborje.inverter", "1.0")
    assert record.to_dict()["payload"] == {}


@pytest.mark.parametrize("data", [b"\xff\xfe", b"not json", b"[1, 2]"])
def test_malformed_payload_raises(data):
    with pytest.raises(AdjustmentDataError):
        AdjustmentData("se.lenborje.inverter", "1.0", data).payload()
