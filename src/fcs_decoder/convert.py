"""
fcs_decoder.convert

Raw-to-engineering conversion driven by the signal table of the frame definition.

Each signal declares a domain maximum and either an enumeration or a linear
transform (``raw * scale + offset``) with a unit and display precision. Raw
values outside the domain never produce a number: they come back as an
explicit UNKNOWN EngineeringValue.
"""

from typing import Dict, Optional, Tuple, Union

from common.models import EngineeringValue, FlightControlRecord, FrameSpec, SignalSpec

from .definition import load_frame_spec

OUT_OF_DOMAIN = "out_of_domain"
INVALID_WIDTH = "invalid_width"

# Units rendered without a separating space
_UNIT_SUFFIXES = {"deg": "°"}

RawValue = Union[int, bytes, bytearray, memoryview]


def format_value(value: Union[int, float], signal: SignalSpec) -> str:
    number = f"{value:.{signal.precision}f}"
    if not signal.unit:
        return number
    suffix = _UNIT_SUFFIXES.get(signal.unit)
    if suffix:
        return f"{number}{suffix}"
    return f"{number} {signal.unit}"


def _unknown(signal: SignalSpec, raw: int, reason: str, text: str) -> EngineeringValue:
    return EngineeringValue(
        name=signal.name,
        label=signal.label,
        raw=raw,
        value=None,
        unit=signal.unit,
        text=text,
        known=False,
        reason=reason,
    )


def convert_field(signal: SignalSpec, raw: RawValue) -> EngineeringValue:
    """
    Convert one raw value to its engineering value.

    ``raw`` is the unsigned integer read from the frame or, for multi-byte
    signals, the big-endian byte run itself.
    """
    if isinstance(raw, (bytes, bytearray, memoryview)):
        raw_bytes = bytes(raw)
        raw = int.from_bytes(raw_bytes, byteorder="big")
        expected = signal.size or 1
        if len(raw_bytes) != expected:
            return _unknown(
                signal,
                raw,
                INVALID_WIDTH,
                f"UNKNOWN (expected {expected} bytes, got {len(raw_bytes)})",
            )

    if raw < 0 or raw > signal.max:
        return _unknown(signal, raw, OUT_OF_DOMAIN, f"UNKNOWN ({raw})")

    if signal.enum is not None:
        label = signal.enum.get(raw)
        if label is None:
            return _unknown(signal, raw, OUT_OF_DOMAIN, f"UNKNOWN ({raw})")
        return EngineeringValue(
            name=signal.name, label=signal.label, raw=raw, value=label, text=label
        )

    value = raw * signal.scale + signal.offset
    if signal.precision:
        # + 0.0 folds -0.0 into 0.0
        value = round(value, signal.precision) + 0.0
    else:
        value = int(round(value))

    return EngineeringValue(
        name=signal.name,
        label=signal.label,
        raw=raw,
        value=value,
        unit=signal.unit,
        text=format_value(value, signal),
    )


def convert_value(name: str, raw: RawValue, spec: Optional[FrameSpec] = None) -> EngineeringValue:
    """Convert ``raw`` using the signal called ``name``."""
    if spec is None:
        spec = load_frame_spec()
    return convert_field(spec.signal(name), raw)


def convert_record(
    record: FlightControlRecord, spec: Optional[FrameSpec] = None
) -> Dict[str, EngineeringValue]:
    """Convert every field of ``record``, in frame order."""
    if spec is None:
        spec = load_frame_spec()
    return {
        signal.name: convert_field(signal, getattr(record, signal.name)) for signal in spec.signals
    }


def format_record(
    record: FlightControlRecord, spec: Optional[FrameSpec] = None
) -> Tuple[Dict[str, str], Dict[str, int]]:
    """
    Convert ``record`` to display strings:
      - decoded: human-readable strings (with scale/offset/enum logic)
      - raw_values: the integer fields

    Returns:
      tuple(decoded: dict[str,str], raw_values: dict[str,int])
    """
    converted = convert_record(record, spec)
    decoded = {name: value.text for name, value in converted.items()}
    raw_values = {name: value.raw for name, value in converted.items()}
    return decoded, raw_values
