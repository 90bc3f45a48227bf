import io

from toolz import partition_all

BITS_PER_GROUP = 8


def padding_for(bit_length: int) -> int:
    """Returns the number of zero bits filling up the last group."""
    return -bit_length % BITS_PER_GROUP


# e.g. "01" -> (b"\x40", 2): 0b01 shifted into the high-order end of the byte.
def pack_bits(bits: str) -> tuple[bytes, int]:
    packed = bytearray()
    for group in partition_all(BITS_PER_GROUP, bits):
        value = int("".join(group), 2)
        # A short final group is left-shifted by the padding count.
        value <<= BITS_PER_GROUP - len(group)
        packed.append(value)
    return bytes(packed), len(bits)


class BitStream:
    def __init__(self, byte_stream: bytes) -> None:
        self._stream = io.BytesIO(byte_stream)
        self._byte = 0
        self._bit_offset = 0

    # Returns 1 bit from the data sliced byte by byte from the stream.
    # The bit is read from the MSB to the LSB of the byte.
    def read_bit(self) -> int:
        if self._bit_offset == 0:
            self._byte = self._stream.read(1)[0]
        bit = (self._byte >> (BITS_PER_GROUP - 1 - self._bit_offset)) & 0b1
        self._bit_offset += 1
        if self._bit_offset == BITS_PER_GROUP:
            self._bit_offset = 0
        return bit
