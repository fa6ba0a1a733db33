"""
Tests for Pydantic models defined in `common.models`.

This module verifies:
- Location rules of SignalSpec (bit/bits pairing, byte boundary, size exclusivity).
- Offset rules of FrameConstants.
- Defaults of ChecksumSpec and EngineeringValue.
- The tagged shape of DecodeResult.
"""

import pytest
from pydantic import ValidationError

from common.models import (
    ChecksumSpec,
    DecodeResult,
    EngineeringValue,
    FrameConstants,
    FrameErrorKind,
    FrameSpec,
    SignalSpec,
)


def test_signal_spec_kinds():
    bit_field = SignalSpec(name="a", label="A", byte=4, bit=1, bits=4, max=8)
    whole_byte = SignalSpec(name="b", label="B", byte=7, max=250)
    multi_byte = SignalSpec(name="c", label="C", byte=14, size=4, max=10)

    assert bit_field.is_bit_field and not bit_field.is_multi_byte
    assert bit_field.width == 4
    assert not whole_byte.is_bit_field and not whole_byte.is_multi_byte
    assert whole_byte.width == 8
    assert multi_byte.is_multi_byte
    assert multi_byte.width == 32


def test_signal_spec_defaults():
    signal = SignalSpec(name="b", label="B", byte=7, max=250)
    assert signal.scale == 1.0
    assert signal.offset == 0.0
    assert signal.unit is None
    assert signal.precision == 0
    assert signal.enum is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bit": 3},  # bit without bits
        {"bits": 3},  # bits without bit
        {"bit": 6, "bits": 3},  # crosses byte boundary
        {"bit": 0, "bits": 1, "size": 2},  # both bit field and multi-byte
        {"bit": 8, "bits": 1},
        {"bit": 0, "bits": 0},
    ],
)
def test_signal_spec_invalid_locations(kwargs):
    with pytest.raises(ValidationError):
        SignalSpec(name="x", label="X", byte=4, max=1, **kwargs)


def test_signal_spec_enum_keys_coerced_to_int():
    signal = SignalSpec(name="x", label="X", byte=4, bit=0, bits=1, max=1, enum={"0": "OFF"})
    assert signal.enum == {0: "OFF"}


def test_frame_constants_defaults_and_overlap():
    constants = FrameConstants()
    assert (constants.length, constants.sync) == (32, 0xAF)
    with pytest.raises(ValidationError):
        FrameConstants(payload_length=27)
    with pytest.raises(ValidationError):
        FrameConstants(checksum_offset=31)


def test_checksum_spec_defaults():
    checksum = ChecksumSpec()
    assert checksum.name == "crc-ccitt-false"
    assert checksum.poly == 0x11021
    assert checksum.xor_out == 0


def test_frame_spec_rejects_duplicate_signals():
    signal = SignalSpec(name="dup", label="Dup", byte=7, max=1)
    with pytest.raises(ValidationError, match="Duplicate"):
        FrameSpec(signals=(signal, signal))


def test_engineering_value_defaults():
    value = EngineeringValue(name="knob_speed", label="Knob speed", raw=5, value=5, text="5 km/h")
    assert value.known
    assert value.reason is None


def test_decode_result_error_only():
    result = DecodeResult(error=FrameErrorKind.INVALID_SYNC, message="bad sync")
    assert not result.ok
    assert result.error == "invalid_sync"


def test_signal_spec_enum_is_read_only():
    labels = {0: "OFF", 1: "ON"}
    signal = SignalSpec(name="x", label="X", byte=4, bit=0, bits=1, max=1, enum=labels)

    labels[0] = "changed"
    with pytest.raises(TypeError):
        signal.enum[1] = "changed"

    assert signal.enum[0] == "OFF"
    assert signal.model_dump()["enum"] == {0: "OFF", 1: "ON"}
