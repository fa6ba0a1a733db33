"""
fcs_decoder
===========

Library for validating and decoding 32-byte flight control frames.

This package contains the core decoding logic: bounded bit/byte extraction,
structural and CRC validation of a frame, the byte/bit layout of its fields,
and conversion of raw values to engineering units for display.

Functions:
    - get_bits: Extract a bit span from one byte of a buffer
    - validate_frame: Check length, sync, addresses and CRC of a frame
    - decode_frame: Build a FlightControlRecord from a validated frame
    - validate_and_decode: Validate then decode, returning a DecodeResult
    - convert_field / convert_value / convert_record / format_record:
      Convert raw values to engineering values and display strings
    - encode_frame: Pack a record into a conforming frame
    - load_frame_spec: Load the YAML frame definition
"""

from .bitfield import BitFieldReader, get_bits
from .checksum import compute_checksum
from .convert import convert_field, convert_record, convert_value, format_record
from .decode import decode_frame, read_signal, validate_and_decode
from .definition import load_frame_spec
from .encode import encode_frame, payload_bytes
from .errors import (
    BitRangeError,
    ByteRangeError,
    ChecksumMismatchError,
    DecodeError,
    FieldRangeError,
    FrameError,
    FrameSpecError,
    InvalidDestinationAddressError,
    InvalidLengthError,
    InvalidSourceAddressError,
    InvalidSyncError,
)
from .validate import frame_checksum, validate_frame

__all__ = [
    "BitFieldReader",
    "get_bits",
    "compute_checksum",
    "frame_checksum",
    "validate_frame",
    "read_signal",
    "decode_frame",
    "validate_and_decode",
    "convert_field",
    "convert_value",
    "convert_record",
    "format_record",
    "encode_frame",
    "payload_bytes",
    "load_frame_spec",
    "DecodeError",
    "FrameError",
    "InvalidLengthError",
    "InvalidSyncError",
    "InvalidDestinationAddressError",
    "InvalidSourceAddressError",
    "ChecksumMismatchError",
    "FieldRangeError",
    "BitRangeError",
    "ByteRangeError",
    "FrameSpecError",
]
