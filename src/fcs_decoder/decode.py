"""
fcs_decoder.decode

Field layout decoding of validated flight control frames.

Functions:
    - read_signal: Reads one signal's raw value through a BitFieldReader
    - decode_frame: Builds a FlightControlRecord from a frame (no integrity checks)
    - validate_and_decode: Validates then decodes, returning a tagged DecodeResult

Notes:
    - decode_frame trusts its input. Integrity belongs to validate.validate_frame,
      and validate_and_decode is the entry point for untrusted buffers.
    - Multi-byte signals are big-endian on the wire regardless of host byte order.
"""

import logging
from typing import Optional

from common.models import DecodeResult, FlightControlRecord, FrameSpec, SignalSpec

from .bitfield import BitFieldReader, Buffer
from .definition import load_frame_spec
from .errors import DecodeError
from .validate import validate_frame

logger = logging.getLogger(__name__)


def read_signal(reader: BitFieldReader, signal: SignalSpec) -> int:
    """Read the raw unsigned value of ``signal``."""
    if signal.is_bit_field:
        return reader.bits(signal.byte, signal.bit, signal.bits)
    if signal.is_multi_byte:
        return reader.uint_be(signal.byte, signal.size)
    return reader.byte(signal.byte)


def decode_frame(frame: Buffer, spec: Optional[FrameSpec] = None) -> FlightControlRecord:
    """
    Decode every signal of ``frame`` into a FlightControlRecord.

    The record is built in one step after all signals were read; a failed read
    raises before any record exists.

    Raises:
        BitRangeError, ByteRangeError: the frame is too short for the layout.
    """
    if spec is None:
        spec = load_frame_spec()
    reader = BitFieldReader(frame)
    values = {signal.name: read_signal(reader, signal) for signal in spec.signals}
    return FlightControlRecord(**values)


def validate_and_decode(frame: Buffer, spec: Optional[FrameSpec] = None) -> DecodeResult:
    """
    Validate ``frame`` and decode it.

    Returns:
      DecodeResult with ``record`` set on success, or ``error`` (a FrameErrorKind)
      and ``message`` describing the first failure.
    """
    if spec is None:
        spec = load_frame_spec()
    try:
        validate_frame(frame, spec)
        record = decode_frame(frame, spec)
    except DecodeError as e:
        logger.debug(f"Frame rejected ({e.kind.value if e.kind else 'unknown'}): {e}")
        return DecodeResult(error=e.kind, message=str(e))
    return DecodeResult(record=record)
