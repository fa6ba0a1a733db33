"""
Handles the processing of received flight control frames.

This module is responsible for:
- Validating and decoding a raw frame using `fcs_decoder`.
- Converting the decoded record to engineering values.
- Logging rejected frames and out-of-domain field values.
- Recording relevant metrics.
- Producing a FrameReport for the presentation layer.
"""

import logging
import time
from typing import Optional

from common.models import FrameSpec
from fcs_decoder import convert_record, load_frame_spec, validate_and_decode
from fcs_decoder.bitfield import Buffer
from fcs_monitor.config import get_actual_spec_path
from fcs_monitor.metrics import (
    DECODE_ERRORS,
    FRAME_COUNTER,
    FRAME_LATENCY,
    SUCCESSFUL_DECODES,
    UNKNOWN_VALUES,
)
from fcs_monitor.models import FrameReport

logger = logging.getLogger(__name__)


def process_frame(
    data: Buffer, source: str = "unknown", spec: Optional[FrameSpec] = None
) -> FrameReport:
    """
    Run one received buffer through validation, decoding and conversion.

    Args:
        data: The received bytes.
        source: Where the frame came from (e.g. a peer address), used in logs.
        spec: Frame definition; resolved from configuration when omitted.

    Returns:
        FrameReport: ``ok`` with converted values, or the error kind and message.
    """
    if spec is None:
        spec = load_frame_spec(get_actual_spec_path())

    FRAME_COUNTER.inc()
    start_time = time.perf_counter()
    frame = bytes(data)
    now_ts = time.time()

    try:
        result = validate_and_decode(frame, spec)
        if not result.ok:
            DECODE_ERRORS.labels(kind=result.error.value).inc()
            logger.warning(
                f"Rejected frame from {source} ({result.error.value}): {result.message}"
            )
            return FrameReport(
                ok=False,
                source=source,
                timestamp=now_ts,
                frame_hex=frame.hex().upper(),
                error=result.error,
                message=result.message,
            )

        converted = convert_record(result.record, spec)
    finally:
        FRAME_LATENCY.observe(time.perf_counter() - start_time)

    unknown_fields = [name for name, value in converted.items() if not value.known]
    for name in unknown_fields:
        UNKNOWN_VALUES.labels(field=name).inc()
        logger.debug(
            f"Field {name} from {source} outside declared domain: raw={converted[name].raw}"
        )

    SUCCESSFUL_DECODES.inc()
    return FrameReport(
        ok=True,
        source=source,
        timestamp=now_ts,
        frame_hex=frame.hex().upper(),
        value={name: value.text for name, value in converted.items()},
        raw={name: value.raw for name, value in converted.items()},
        unknown_fields=unknown_fields,
    )
