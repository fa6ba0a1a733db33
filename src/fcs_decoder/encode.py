"""
fcs_decoder.encode

Packing of a FlightControlRecord into a conforming frame.

Used to build frames for tests and simulators; the receive path never encodes.
"""

from typing import Optional

from common.models import FlightControlRecord, FrameSpec

from .checksum import compute_checksum
from .definition import load_frame_spec


def payload_bytes(record: FlightControlRecord, spec: Optional[FrameSpec] = None) -> bytes:
    """Pack ``record`` into the payload bytes covered by the checksum."""
    if spec is None:
        spec = load_frame_spec()
    start = spec.frame.payload_start
    payload = bytearray(spec.frame.payload_length)

    for signal in spec.signals:
        raw = getattr(record, signal.name)
        if raw >= 1 << signal.width:
            raise ValueError(f"{signal.name}={raw} does not fit in {signal.width} bits")
        index = signal.byte - start
        if signal.is_bit_field:
            payload[index] |= raw << signal.bit
        elif signal.is_multi_byte:
            payload[index : index + signal.size] = raw.to_bytes(signal.size, byteorder="big")
        else:
            payload[index] = raw

    return bytes(payload)


def encode_frame(
    record: FlightControlRecord, spec: Optional[FrameSpec] = None, *, reserved: int = 0
) -> bytes:
    """
    Build a complete frame: sync, addresses, reserved byte, payload and CRC.

    Args:
        record: Field values to pack.
        spec: Frame definition; the bundled one when omitted.
        reserved: Value of byte 3.
    """
    if spec is None:
        spec = load_frame_spec()
    constants = spec.frame
    payload = payload_bytes(record, spec)

    frame = bytearray(constants.length)
    frame[0] = constants.sync
    frame[1] = constants.destination_address
    frame[2] = constants.source_address
    frame[3] = reserved
    frame[constants.payload_start : constants.payload_start + len(payload)] = payload

    crc = compute_checksum(payload, spec.checksum)
    frame[constants.checksum_offset : constants.checksum_offset + 2] = crc.to_bytes(
        2, byteorder="big"
    )
    return bytes(frame)
