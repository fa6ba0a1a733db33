"""
fcs_monitor

Consumer-facing layer for fcs-frame-decoder. A receiver hands each raw buffer
to `process_frame`, which validates, decodes and converts it, logs and counts
the outcome, and returns a FrameReport for display.

Modules:
    - config: Logging setup and frame definition path resolution
    - frame_processing: Per-frame pipeline producing FrameReports
    - main: Command-line runner over hex-encoded frames
    - metrics: Prometheus metrics for frame processing
    - models: Pydantic models handed to the presentation layer
"""

from ._version import VERSION
from .config import configure_logger, get_actual_spec_path
from .frame_processing import process_frame
from .models import FrameReport

__all__ = [
    "VERSION",
    "configure_logger",
    "get_actual_spec_path",
    "process_frame",
    "FrameReport",
]
