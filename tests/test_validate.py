"""
Tests for frame validation and the CRC routine.

Covers the fixed check order (length, sync, destination, source, checksum),
the distinct exception raised by each check, and the CRC parameters.
"""

import pytest

from common.models import ChecksumSpec, FrameErrorKind
from fcs_decoder import (
    ChecksumMismatchError,
    FrameError,
    InvalidDestinationAddressError,
    InvalidLengthError,
    InvalidSourceAddressError,
    InvalidSyncError,
    compute_checksum,
    frame_checksum,
    validate_frame,
)


def test_valid_frame_passes(make_frame):
    assert validate_frame(make_frame({4: 0x81, 7: 0x32})) is None


def test_validate_accepts_bytearray_and_memoryview(make_frame):
    frame = make_frame({10: 0x64})
    validate_frame(bytearray(frame))
    validate_frame(memoryview(frame))


@pytest.mark.parametrize("length", [0, 3, 31, 33, 64])
def test_length_must_be_exact(make_frame, length):
    with pytest.raises(InvalidLengthError) as exc_info:
        validate_frame(make_frame(length=length) if length >= 4 else b"\xaf" * length)
    assert exc_info.value.actual == length
    assert exc_info.value.expected == 32
    assert exc_info.value.kind is FrameErrorKind.INVALID_LENGTH


def test_invalid_sync(make_frame):
    with pytest.raises(InvalidSyncError) as exc_info:
        validate_frame(make_frame(sync=0xAE))
    assert exc_info.value.actual == 0xAE
    assert "0xAE" in str(exc_info.value)


def test_invalid_destination_address(make_frame):
    # The original source and destination values swapped
    with pytest.raises(InvalidDestinationAddressError):
        validate_frame(make_frame(destination=0x01, source=0x0A))


def test_invalid_source_address(make_frame):
    with pytest.raises(InvalidSourceAddressError) as exc_info:
        validate_frame(make_frame(source=0x02))
    assert exc_info.value.expected == 0x01


def test_checksum_mismatch(make_frame):
    frame = make_frame({4: 0x81}, crc=0x0000)
    with pytest.raises(ChecksumMismatchError) as exc_info:
        validate_frame(frame)
    assert exc_info.value.received == 0x0000
    assert exc_info.value.calculated == frame_checksum(frame)
    assert exc_info.value.kind is FrameErrorKind.CHECKSUM_MISMATCH


def test_checksum_covers_every_payload_byte(make_frame):
    good = make_frame({4: 0x81})
    for index in range(4, 30):
        corrupted = bytearray(good)
        corrupted[index] ^= 0x01
        with pytest.raises(ChecksumMismatchError):
            validate_frame(bytes(corrupted))


def test_reserved_byte_is_not_checked(make_frame):
    validate_frame(make_frame(reserved=0x5A))


def test_checks_run_in_order(make_frame):
    """Every field wrong at once reports the first check in the sequence."""
    everything_wrong = make_frame(sync=0x00, destination=0x00, source=0x00, crc=0x1234)
    with pytest.raises(InvalidSyncError):
        validate_frame(everything_wrong)

    with pytest.raises(InvalidDestinationAddressError):
        validate_frame(make_frame(destination=0x00, source=0x00, crc=0x1234))

    with pytest.raises(InvalidSourceAddressError):
        validate_frame(make_frame(source=0x00, crc=0x1234))

    with pytest.raises(InvalidLengthError):
        validate_frame(make_frame(sync=0x00, length=31))


def test_all_validation_errors_are_frame_errors():
    for exc_type in (
        InvalidLengthError,
        InvalidSyncError,
        InvalidDestinationAddressError,
        InvalidSourceAddressError,
        ChecksumMismatchError,
    ):
        assert issubclass(exc_type, FrameError)


def test_crc_ccitt_false_check_value():
    assert compute_checksum(b"123456789") == 0x29B1


def test_crc_empty_payload_is_initial_value():
    assert compute_checksum(b"") == 0xFFFF


@pytest.mark.parametrize(
    "checksum,expected",
    [
        (ChecksumSpec(name="xmodem", init=0x0000), 0x31C3),
        (ChecksumSpec(name="kermit", init=0x0000, reflected=True), 0x2189),
        (ChecksumSpec(name="genibus", init=0xFFFF, xor_out=0xFFFF), 0xD64E),
    ],
)
def test_crc_parameters_come_from_checksum_spec(checksum, expected):
    assert compute_checksum(b"123456789", checksum) == expected


def test_frame_checksum_matches_trailer(make_frame):
    frame = make_frame({5: 0x28, 14: 0xD6, 15: 0x93})
    assert frame_checksum(frame) == int.from_bytes(frame[30:32], "big")
