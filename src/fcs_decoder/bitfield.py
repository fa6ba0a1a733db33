"""
fcs_decoder.bitfield

Bounds-checked extraction of bit spans and byte ranges from a fixed buffer.

Bit positions count from the least significant bit (0) to the most
significant bit (7) of a byte. A bit span never crosses a byte boundary.
"""

from typing import Union

from .errors import BitRangeError, ByteRangeError

Buffer = Union[bytes, bytearray, memoryview]


def get_bits(data: Buffer, byte_index: int, bit_position: int, bit_count: int) -> int:
    """
    Extract ``bit_count`` bits starting at ``bit_position`` of ``data[byte_index]``.
    """
    return BitFieldReader(data).bits(byte_index, bit_position, bit_count)


class BitFieldReader:
    """
    Read-only view over a fixed buffer.

    The buffer is copied on construction, so the reader can be shared freely
    and queried any number of times in any order.
    """

    __slots__ = ("_buffer",)

    def __init__(self, data: Buffer):
        self._buffer = bytes(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def bits(self, byte_index: int, bit_position: int, bit_count: int) -> int:
        """
        Return the right-aligned value of bits
        ``bit_position .. bit_position + bit_count - 1`` of byte ``byte_index``.

        Raises:
            BitRangeError: the byte index is outside the buffer, or the span is
                empty, negative or crosses the byte boundary.
        """
        if (
            not 0 <= byte_index < len(self._buffer)
            or bit_position < 0
            or bit_count < 1
            or bit_position + bit_count > 8
        ):
            raise BitRangeError(
                f"Parameters are out of range: byte_index={byte_index}, "
                f"bit_position={bit_position}, bit_count={bit_count}, "
                f"buffer length={len(self._buffer)}"
            )
        mask = (1 << bit_count) - 1
        return (self._buffer[byte_index] >> bit_position) & mask

    def byte(self, byte_index: int) -> int:
        """
        Return the byte at ``byte_index``.

        Raises:
            ByteRangeError: the index is outside the buffer.
        """
        if not 0 <= byte_index < len(self._buffer):
            raise ByteRangeError(
                f"byte_index {byte_index} outside buffer of length {len(self._buffer)}"
            )
        return self._buffer[byte_index]

    def byte_range(self, start_index: int, byte_count: int) -> bytes:
        """
        Return ``byte_count`` bytes starting at ``start_index``.

        ``start_index + byte_count == len(buffer)`` is valid.

        Raises:
            ByteRangeError: the range runs past the end of the buffer.
        """
        if start_index < 0 or byte_count < 0 or start_index + byte_count > len(self._buffer):
            raise ByteRangeError(
                f"Invalid start_index or byte_count: start_index={start_index}, "
                f"byte_count={byte_count}, buffer length={len(self._buffer)}"
            )
        return self._buffer[start_index : start_index + byte_count]

    def uint_be(self, start_index: int, byte_count: int) -> int:
        """Interpret a byte range as an unsigned big-endian integer."""
        return int.from_bytes(self.byte_range(start_index, byte_count), byteorder="big")
