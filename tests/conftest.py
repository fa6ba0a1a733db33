import pytest

from common.models import FlightControlRecord
from fcs_decoder import compute_checksum, load_frame_spec

FRAME_LENGTH = 32
PAYLOAD_START = 4
PAYLOAD_END = 30


def build_frame(
    payload=None,
    *,
    sync=0xAF,
    destination=0x0A,
    source=0x01,
    reserved=0x00,
    crc=None,
    length=FRAME_LENGTH,
) -> bytes:
    """
    Build a frame by hand, independently of fcs_decoder.encode.

    ``payload`` maps absolute byte indices (4-29) to byte values; unspecified
    payload bytes are zero. ``crc`` overrides the computed checksum.
    """
    frame = bytearray(max(length, FRAME_LENGTH))
    frame[0] = sync
    frame[1] = destination
    frame[2] = source
    frame[3] = reserved
    for index, value in (payload or {}).items():
        frame[index] = value
    if crc is None:
        crc = compute_checksum(bytes(frame[PAYLOAD_START:PAYLOAD_END]))
    frame[30] = (crc >> 8) & 0xFF
    frame[31] = crc & 0xFF
    return bytes(frame[:length])


@pytest.fixture
def make_frame():
    """Provides the hand-rolled frame builder."""
    return build_frame


@pytest.fixture(scope="session")
def frame_spec():
    """The bundled frame definition."""
    return load_frame_spec()


@pytest.fixture
def record_values():
    """Field values for a record exercising every signal."""
    return {
        "mode_override": 1,
        "flight_mode": 2,
        "mode_engage": 5,
        "flap_override": 0,
        "flap_angle": 33,
        "wing_tilt_override": 1,
        "tilt_angle": 45,
        "knob_speed": 120,
        "knob_altitude": 80,
        "knob_heading": 91,
        "stick_throttle": 150,
        "stick_roll": 20,
        "stick_pitch": 180,
        "stick_yaw": 100,
        "lon_of_lp": 3_069_780_000,
        "lat_of_lp": 1_275_665_000,
        "alt_of_lp": 24_000,
        "engine_start_stop": 1,
        "raft_drop": 0,
    }


@pytest.fixture
def sample_record(record_values):
    return FlightControlRecord(**record_values)


@pytest.fixture
def zero_record():
    return FlightControlRecord(**{name: 0 for name in FlightControlRecord.model_fields})
