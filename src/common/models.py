"""
common.models

Shared Pydantic models for use across fcs-frame-decoder modules.

FrameErrorKind:
    Enumerates every distinct way a frame can be rejected or fail to decode.

SignalSpec, FrameConstants, ChecksumSpec, FrameSpec:
    The frame definition: wire constants, CRC parameters, field layout and the
    raw-to-engineering transform table. Loaded once from YAML and never mutated.

FlightControlRecord:
    The raw fields of one accepted flight control frame.

EngineeringValue:
    One field converted to an engineering value, or an explicit unknown marker.

DecodeResult:
    Tagged result of validate-then-decode: either a record or an error kind.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


class FrameErrorKind(str, Enum):
    """Distinct failure kinds surfaced by validation and field extraction."""

    INVALID_LENGTH = "invalid_length"
    INVALID_SYNC = "invalid_sync"
    INVALID_DESTINATION_ADDRESS = "invalid_destination_address"
    INVALID_SOURCE_ADDRESS = "invalid_source_address"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    BIT_RANGE = "bit_range"
    BYTE_RANGE = "byte_range"


# ── Frame definition ─────────────────────────────────────────────────────────
class SignalSpec(BaseModel):
    """
    Location and conversion rule for a single frame field.

    A field is either a bit field (``bit`` and ``bits`` set), a whole byte
    (neither set), or a big-endian multi-byte integer (``size`` set).

    Attributes:
        name (str): Attribute name on FlightControlRecord.
        label (str): Human-readable name.
        byte (int): Index of the (first) byte holding the field.
        bit (Optional[int]): LSB position of a bit field within its byte.
        bits (Optional[int]): Width of a bit field.
        size (Optional[int]): Byte count of a multi-byte field.
        max (int): Largest raw value inside the declared domain.
        enum (Optional[Mapping[int, str]]): Read-only labels for enumerated fields.
        scale (float): Multiplier applied to the raw value.
        offset (float): Added after scaling.
        unit (Optional[str]): Engineering unit ('deg', 'km/h', 'm'), None if unitless.
        precision (int): Decimal places used when formatting.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    byte: int = Field(ge=0)
    bit: Optional[int] = Field(default=None, ge=0, le=7)
    bits: Optional[int] = Field(default=None, ge=1, le=8)
    size: Optional[int] = Field(default=None, ge=1)
    max: int = Field(ge=0)
    enum: Optional[Dict[int, str]] = None
    scale: float = 1.0
    offset: float = 0.0
    unit: Optional[str] = None
    precision: int = Field(default=0, ge=0)

    @field_validator("enum", mode="after")
    @classmethod
    def _freeze_enum(cls, value: Optional[Dict[int, str]]) -> Optional[Mapping[int, str]]:
        # Loaded definitions are shared by every caller
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @field_serializer("enum")
    def _dump_enum(self, value: Optional[Mapping[int, str]]) -> Optional[Dict[int, str]]:
        return None if value is None else dict(value)

    @model_validator(mode="after")
    def _check_location(self) -> "SignalSpec":
        if (self.bit is None) != (self.bits is None):
            raise ValueError(f"Signal '{self.name}': 'bit' and 'bits' must be given together")
        if self.bit is not None and self.size is not None:
            raise ValueError(f"Signal '{self.name}': a bit field cannot also have 'size'")
        if self.bit is not None and self.bit + self.bits > 8:
            raise ValueError(f"Signal '{self.name}': bit field spans a byte boundary")
        return self

    @property
    def is_bit_field(self) -> bool:
        return self.bit is not None

    @property
    def is_multi_byte(self) -> bool:
        return self.size is not None

    @property
    def width(self) -> int:
        """Width of the field on the wire, in bits."""
        if self.bits is not None:
            return self.bits
        if self.size is not None:
            return self.size * 8
        return 8


class FrameConstants(BaseModel):
    """Fixed wire constants of the frame."""

    model_config = ConfigDict(frozen=True)

    length: int = 32
    sync: int = 0xAF
    destination_address: int = 0x0A
    source_address: int = 0x01
    payload_start: int = 4
    payload_length: int = 26
    checksum_offset: int = 30

    @model_validator(mode="after")
    def _check_offsets(self) -> "FrameConstants":
        if self.payload_start + self.payload_length > self.checksum_offset:
            raise ValueError("Payload overlaps the checksum bytes")
        if self.checksum_offset + 2 > self.length:
            raise ValueError("Checksum does not fit inside the frame")
        return self


class ChecksumSpec(BaseModel):
    """CRC-16 parameters, in the form crcmod.mkCrcFun expects."""

    model_config = ConfigDict(frozen=True)

    name: str = "crc-ccitt-false"
    poly: int = 0x11021
    init: int = 0xFFFF
    reflected: bool = False
    xor_out: int = 0x0000


class FrameSpec(BaseModel):
    """
    FrameSpec

    The complete frame definition: wire constants, checksum parameters and the
    ordered signal table.

    Attributes:
        frame (FrameConstants): Length, sync, addresses and payload/CRC offsets.
        checksum (ChecksumSpec): CRC parameters.
        signals (Tuple[SignalSpec, ...]): Signal layout and transform table.
        source_path (Optional[str]): File the definition was loaded from.
    """

    model_config = ConfigDict(frozen=True)

    frame: FrameConstants = Field(default_factory=FrameConstants)
    checksum: ChecksumSpec = Field(default_factory=ChecksumSpec)
    signals: Tuple[SignalSpec, ...]
    source_path: Optional[str] = None

    @model_validator(mode="after")
    def _check_signals(self) -> "FrameSpec":
        names = [f.name for f in self.signals]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate signal names: {duplicates}")
        payload_end = self.frame.payload_start + self.frame.payload_length
        for f in self.signals:
            last = f.byte + (f.size or 1)
            if f.byte < self.frame.payload_start or last > payload_end:
                raise ValueError(f"Signal '{f.name}' lies outside the payload")
        return self

    def signal(self, name: str) -> SignalSpec:
        for f in self.signals:
            if f.name == name:
                return f
        raise KeyError(name)


# ── Decoded data ─────────────────────────────────────────────────────────────
class FlightControlRecord(BaseModel):
    """Raw field values of one accepted flight control frame."""

    model_config = ConfigDict(frozen=True)

    mode_override: int = Field(ge=0, le=0x1)
    flight_mode: int = Field(ge=0, le=0x3)
    mode_engage: int = Field(ge=0, le=0xF)
    flap_override: int = Field(ge=0, le=0x1)
    flap_angle: int = Field(ge=0, le=0x3F)
    wing_tilt_override: int = Field(ge=0, le=0x1)
    tilt_angle: int = Field(ge=0, le=0x7F)
    knob_speed: int = Field(ge=0, le=0xFF)
    knob_altitude: int = Field(ge=0, le=0xFF)
    knob_heading: int = Field(ge=0, le=0xFF)
    stick_throttle: int = Field(ge=0, le=0xFF)
    stick_roll: int = Field(ge=0, le=0xFF)
    stick_pitch: int = Field(ge=0, le=0xFF)
    stick_yaw: int = Field(ge=0, le=0xFF)
    lon_of_lp: int = Field(ge=0, le=0xFFFFFFFF)
    lat_of_lp: int = Field(ge=0, le=0xFFFFFFFF)
    alt_of_lp: int = Field(ge=0, le=0xFFFF)
    engine_start_stop: int = Field(ge=0, le=0x1)
    raft_drop: int = Field(ge=0, le=0x1)


class EngineeringValue(BaseModel):
    """
    A raw field converted to its engineering value.

    When ``known`` is False the raw value was outside the declared domain (or a
    byte run had the wrong width): ``value`` is None and ``text`` is an
    explicit UNKNOWN marker.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    raw: int
    value: Union[int, float, str, None] = None
    unit: Optional[str] = None
    text: str
    known: bool = True
    reason: Optional[str] = Field(
        None, description="Why the value is unknown: 'out_of_domain' or 'invalid_width'."
    )


class DecodeResult(BaseModel):
    """Either a decoded record or the kind of failure that prevented it."""

    model_config = ConfigDict(frozen=True)

    record: Optional[FlightControlRecord] = None
    error: Optional[FrameErrorKind] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def _check_tag(self) -> "DecodeResult":
        if (self.record is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of 'record' or 'error'")
        return self

    @property
    def ok(self) -> bool:
        return self.record is not None
