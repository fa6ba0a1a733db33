"""
fcs_decoder.checksum

CRC-16 over the frame payload.

The default parameters are CRC-16/CCITT-FALSE (poly 0x1021, init 0xFFFF, not
reflected, no final XOR). They come from the frame definition so a deployment
can pin them to the producer's checksum routine.
"""

import functools
from typing import Callable, Optional, Union

import crcmod

from common.models import ChecksumSpec

_DEFAULT_CHECKSUM = ChecksumSpec()


@functools.lru_cache(maxsize=None)
def _crc_function(poly: int, init: int, reflected: bool, xor_out: int) -> Callable[[bytes], int]:
    # crcmod expects the initial register value pre-XORed with the final XOR
    return crcmod.mkCrcFun(poly, initCrc=init ^ xor_out, rev=reflected, xorOut=xor_out)


def compute_checksum(
    payload: Union[bytes, bytearray, memoryview], checksum: Optional[ChecksumSpec] = None
) -> int:
    """Return the 16-bit CRC of ``payload``."""
    checksum = checksum or _DEFAULT_CHECKSUM
    crc = _crc_function(checksum.poly, checksum.init, checksum.reflected, checksum.xor_out)
    return crc(bytes(payload))
