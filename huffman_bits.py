# filename: huffman_bits.py

from huffman_errors import MalformedBitstreamError


def pack_bits(bits):
    """Pack a '0'/'1' string MSB first, zero-padding the last byte.

    Returns ``(packed, padding)`` where ``padding`` is the number of zero
    bits added to reach the byte boundary (0 when already aligned).
    """
    padding = -len(bits) % 8
    if not bits:
        return b"", 0
    bits += "0" * padding
    return int(bits, 2).to_bytes(len(bits) // 8, byteorder="big"), padding


def unpack_bits(data):
    if not data:
        return ""
    return bin(int.from_bytes(data, byteorder="big"))[2:].zfill(len(data) * 8)


class BitReader:
    """Sequential reader over a '0'/'1' string."""

    def __init__(self, bits):
        self.bits = bits
        self.pos = 0

    def remaining(self):
        return len(self.bits) - self.pos

    def read(self, n):
        if n > self.remaining():
            raise MalformedBitstreamError(
                f"needed {n} bits at offset {self.pos}, only {self.remaining()} left"
            )
        chunk = self.bits[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def rest(self):
        chunk = self.bits[self.pos:]
        self.pos = len(self.bits)
        return chunk
