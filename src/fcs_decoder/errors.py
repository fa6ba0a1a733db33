"""
fcs_decoder.errors

Exception hierarchy for frame validation and field extraction.

Every concrete exception carries a ``kind`` (a FrameErrorKind) so that callers
can turn it into a tagged DecodeResult without string matching.

    DecodeError
    ├── FrameError                  frame rejected by validation
    │   ├── InvalidLengthError
    │   ├── InvalidSyncError
    │   ├── InvalidDestinationAddressError
    │   ├── InvalidSourceAddressError
    │   └── ChecksumMismatchError
    └── FieldRangeError (IndexError) extraction request outside buffer/byte bounds
        ├── BitRangeError
        └── ByteRangeError

FrameSpecError is raised separately when the frame definition cannot be loaded.
"""

from typing import Optional

from common.models import FrameErrorKind


class DecodeError(Exception):
    """Base class for every failure that prevents a frame from being decoded."""

    kind: Optional[FrameErrorKind] = None


class FrameError(DecodeError):
    """The frame failed structural or integrity validation."""


class InvalidLengthError(FrameError):
    kind = FrameErrorKind.INVALID_LENGTH

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Invalid data length: got {actual} bytes, expected {expected}")


class _UnexpectedByteError(FrameError):
    what = "byte"

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Invalid {self.what}: got 0x{actual:02X}, expected 0x{expected:02X}")


class InvalidSyncError(_UnexpectedByteError):
    kind = FrameErrorKind.INVALID_SYNC
    what = "frame sync"


class InvalidDestinationAddressError(_UnexpectedByteError):
    kind = FrameErrorKind.INVALID_DESTINATION_ADDRESS
    what = "destination address"


class InvalidSourceAddressError(_UnexpectedByteError):
    kind = FrameErrorKind.INVALID_SOURCE_ADDRESS
    what = "source address"


class ChecksumMismatchError(FrameError):
    kind = FrameErrorKind.CHECKSUM_MISMATCH

    def __init__(self, received: int, calculated: int):
        self.received = received
        self.calculated = calculated
        super().__init__(
            f"Mismatch CRC value: received 0x{received:04X}, calculated 0x{calculated:04X}"
        )


class FieldRangeError(DecodeError, IndexError):
    """A field extraction request falls outside the buffer or a single byte."""


class BitRangeError(FieldRangeError):
    kind = FrameErrorKind.BIT_RANGE


class ByteRangeError(FieldRangeError):
    kind = FrameErrorKind.BYTE_RANGE


class FrameSpecError(Exception):
    """The frame definition file is missing, unreadable or malformed."""
