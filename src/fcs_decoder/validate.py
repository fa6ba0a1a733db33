"""
fcs_decoder.validate

Structural and integrity validation of a raw frame.

Checks run in a fixed order and stop at the first failure:
  1. length is exactly the frame length (32)
  2. byte 0 is the frame sync (0xAF)
  3. byte 1 is the destination address (0x0A)
  4. byte 2 is the source address (0x01)
  5. CRC over the payload (bytes 4-29) equals bytes 30-31, big-endian
"""

from typing import Optional

from common.models import FrameSpec

from .bitfield import Buffer
from .checksum import compute_checksum
from .definition import load_frame_spec
from .errors import (
    ChecksumMismatchError,
    InvalidDestinationAddressError,
    InvalidLengthError,
    InvalidSourceAddressError,
    InvalidSyncError,
)


def frame_checksum(frame: Buffer, spec: Optional[FrameSpec] = None) -> int:
    """Compute the CRC over the payload bytes of ``frame``."""
    if spec is None:
        spec = load_frame_spec()
    start = spec.frame.payload_start
    return compute_checksum(bytes(frame[start : start + spec.frame.payload_length]), spec.checksum)


def received_checksum(frame: Buffer, spec: Optional[FrameSpec] = None) -> int:
    """Return the CRC carried in the frame's trailing checksum bytes."""
    if spec is None:
        spec = load_frame_spec()
    offset = spec.frame.checksum_offset
    return int.from_bytes(bytes(frame[offset : offset + 2]), byteorder="big")


def validate_frame(frame: Buffer, spec: Optional[FrameSpec] = None) -> None:
    """
    Validate ``frame`` against the frame definition.

    Raises:
        InvalidLengthError, InvalidSyncError, InvalidDestinationAddressError,
        InvalidSourceAddressError, ChecksumMismatchError: the first check that failed.
    """
    if spec is None:
        spec = load_frame_spec()
    constants = spec.frame
    data = bytes(frame)

    if len(data) != constants.length:
        raise InvalidLengthError(len(data), constants.length)
    if data[0] != constants.sync:
        raise InvalidSyncError(data[0], constants.sync)
    if data[1] != constants.destination_address:
        raise InvalidDestinationAddressError(data[1], constants.destination_address)
    if data[2] != constants.source_address:
        raise InvalidSourceAddressError(data[2], constants.source_address)

    calculated = frame_checksum(data, spec)
    received = received_checksum(data, spec)
    if calculated != received:
        raise ChecksumMismatchError(received, calculated)
