"""
fcs_decoder.definition

Loading of the frame definition (wire constants, CRC parameters, signal layout
and transform table) from YAML.

The bundled definition lives in ``fcs_decoder/config/flight_control.yml``. A
different file can be supplied as an override; unreadable overrides fall back
to the bundled file. Each file is parsed once and the resulting frozen
FrameSpec is shared by every caller.
"""

import functools
import logging
import os
from importlib import resources

import yaml
from pydantic import ValidationError

from common.models import FlightControlRecord, FrameSpec

from .errors import FrameSpecError

logger = logging.getLogger(__name__)


def _default_path() -> str:
    """
    Determine the default path of the frame definition bundled as package data.
    """
    cfg_dir = resources.files(__package__) / "config"
    return str(cfg_dir / "flight_control.yml")


def load_frame_spec(path_override: str | None = None) -> FrameSpec:
    """
    Load the frame definition.

    Path selection logic:
      - If path_override is provided and readable, use it.
      - Otherwise use the bundled flight_control.yml.

    Args:
        path_override (str | None): Optional path to a frame definition YAML file.

    Returns:
        FrameSpec: The parsed, frozen definition.

    Raises:
        FrameSpecError: the selected file cannot be read or does not describe a
            valid flight control frame.
    """
    spec_path = _default_path()
    if path_override:
        if os.path.exists(path_override) and os.access(path_override, os.R_OK):
            spec_path = path_override
        else:
            logger.warning(
                f"Frame definition override path provided but not found/readable: "
                f"{path_override}. Using default: {spec_path}"
            )
    return _load_frame_spec_file(os.path.abspath(spec_path))


def _record_field_max(name: str) -> int:
    """Largest value FlightControlRecord accepts for ``name`` (its ``le`` bound)."""
    for constraint in FlightControlRecord.model_fields[name].metadata:
        le = getattr(constraint, "le", None)
        if le is not None:
            return le
    raise FrameSpecError(f"FlightControlRecord.{name} has no upper bound")


@functools.lru_cache(maxsize=8)
def _load_frame_spec_file(spec_path: str) -> FrameSpec:
    try:
        with open(spec_path) as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise FrameSpecError(f"Cannot read frame definition {spec_path}: {e}") from e

    if not isinstance(raw, dict):
        raise FrameSpecError(f"Frame definition {spec_path} must be a mapping")

    try:
        spec = FrameSpec(**raw, source_path=spec_path)
    except (TypeError, ValidationError) as e:
        raise FrameSpecError(f"Invalid frame definition {spec_path}: {e}") from e

    declared = {s.name for s in spec.signals}
    expected = set(FlightControlRecord.model_fields)
    if declared != expected:
        missing = sorted(expected - declared)
        unexpected = sorted(declared - expected)
        raise FrameSpecError(
            f"Frame definition {spec_path} does not match FlightControlRecord "
            f"(missing: {missing}, unexpected: {unexpected})"
        )

    too_wide = [
        f"{s.name} ({s.width} bits)"
        for s in spec.signals
        if (1 << s.width) - 1 > _record_field_max(s.name)
    ]
    if too_wide:
        raise FrameSpecError(
            f"Frame definition {spec_path} has signals wider than FlightControlRecord "
            f"allows: {', '.join(too_wide)}"
        )

    logger.info(f"Loaded {len(spec.signals)} signal definitions from {spec_path}")
    return spec
