"""
Defines Pydantic models handed from the monitor to a presentation layer.

Models:
    - FrameReport: Outcome of processing one received frame
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from common.models import FrameErrorKind


class FrameReport(BaseModel):
    """Outcome of processing one received frame, successful or not."""

    ok: bool
    source: str
    timestamp: float
    frame_hex: str
    error: Optional[FrameErrorKind] = None
    message: Optional[str] = None
    value: Dict[str, str] = Field(default_factory=dict)
    raw: Dict[str, int] = Field(default_factory=dict)
    unknown_fields: List[str] = Field(
        default_factory=list,
        description="Fields whose raw value was outside the declared domain.",
    )
