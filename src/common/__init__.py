"""
common

This package contains shared models used across the fcs-frame-decoder project.

Modules:
    - models: Defines shared Pydantic models (frame definition, decoded records,
      engineering values and decode results)
"""

from .models import (
    ChecksumSpec,
    DecodeResult,
    EngineeringValue,
    FlightControlRecord,
    FrameConstants,
    FrameErrorKind,
    FrameSpec,
    SignalSpec,
)

__all__ = [
    "ChecksumSpec",
    "DecodeResult",
    "EngineeringValue",
    "FlightControlRecord",
    "FrameConstants",
    "FrameErrorKind",
    "FrameSpec",
    "SignalSpec",
]
