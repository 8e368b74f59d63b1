# filename: huffman_container.py
#
# Layout:
#   magic (2 bytes) | N (1 byte) | N x (symbol, code length) |
#   code bits of the N symbols | content bits | zero padding

import logging
from collections import namedtuple

from huffman_bits import BitReader, pack_bits, unpack_bits
from huffman_config import DEFAULT_CONFIG
from huffman_errors import FormatMismatchError, MalformedBitstreamError

logger = logging.getLogger(__name__)

Container = namedtuple("Container", ["code", "bits"])


def write_container(code, content_bits, config=DEFAULT_CONFIG):
    """Serialize a code table and its encoded content into container bytes."""
    if not 0 < len(code) <= 0xFF:
        raise ValueError(f"code table must hold 1..255 symbols, got {len(code)}")

    header = bytearray(config.magic)
    header.append(len(code))
    for symbol, path in code.items():
        header.append(symbol)
        header.append(len(path))

    packed, padding = pack_bits("".join(code.values()) + content_bits)
    logger.debug(
        "container: %d symbols, %d header bytes, %d content bits, %d padding bits",
        len(code), len(header), len(content_bits), padding,
    )
    return bytes(header) + packed


def read_container(data, config=DEFAULT_CONFIG):
    if data[:2] != config.magic:
        raise FormatMismatchError(
            f"expected magic {config.magic.hex()}, found {bytes(data[:2]).hex() or 'nothing'}"
        )
    if len(data) < 3:
        raise MalformedBitstreamError("container ends before the symbol count")

    count = data[2]
    if count == 0:
        raise MalformedBitstreamError("container declares no symbols")

    table_end = 3 + 2 * count
    if len(data) < table_end:
        raise MalformedBitstreamError(
            f"code table needs {2 * count} bytes, only {len(data) - 3} present"
        )

    lengths = {}
    for i in range(3, table_end, 2):
        symbol, length = data[i], data[i + 1]
        if symbol in lengths:
            raise MalformedBitstreamError(f"symbol {symbol:#04x} listed twice")
        if length == 0 and count > 1:
            raise MalformedBitstreamError(f"symbol {symbol:#04x} has an empty code")
        if length != 0 and count == 1:
            raise MalformedBitstreamError("a single-symbol code must be empty")
        lengths[symbol] = length

    reader = BitReader(unpack_bits(data[table_end:]))
    code = {symbol: reader.read(length) for symbol, length in lengths.items()}
    return Container(code, reader.rest())
