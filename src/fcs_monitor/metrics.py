"""
Defines Prometheus metrics for monitoring flight control frame decoding.

This module centralizes the definition of all Counter and Histogram metrics
used to track frames received, decode outcomes by kind, out-of-domain field
values and decode latency.
"""

from prometheus_client import Counter, Histogram

FRAME_COUNTER = Counter("fcs_frames_total", "Total flight control frames received")
SUCCESSFUL_DECODES = Counter("fcs_successful_decodes_total", "Total successful decodes")
DECODE_ERRORS = Counter(
    "fcs_decode_errors_total", "Total frames rejected, by failure kind", ["kind"]
)
UNKNOWN_VALUES = Counter(
    "fcs_unknown_values_total", "Field values outside their declared domain", ["field"]
)
FRAME_LATENCY = Histogram(
    "fcs_frame_latency_seconds", "Time spent validating, decoding & converting frames"
)
