# filename: huffman_service.py

import logging
import math
from dataclasses import dataclass

from huffman_config import DEFAULT_CONFIG
from huffman_container import read_container, write_container
from huffman_core import HuffmanLogic, as_symbols
from huffman_errors import AlphabetError

logger = logging.getLogger(__name__)


@dataclass
class CompressionStats:
    input_size: int
    compressed_size: int
    alphabet_size: int
    content_bits: int
    padding_bits: int
    average_code_length: float
    entropy: float

    @property
    def ratio(self):
        if not self.input_size:
            return 0.0
        return self.compressed_size / self.input_size

    @property
    def reduction(self):
        """Space saved, in percent of the input size."""
        if not self.input_size:
            return 0.0
        return 100 - self.ratio * 100


class HuffmanService:
    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.logic = HuffmanLogic()

    def _check_alphabet(self, data):
        if self.config.sentinel in data:
            raise AlphabetError(
                f"input contains the reserved end marker {self.config.sentinel:#04x}"
            )
        distinct = len(set(data))
        if distinct > self.config.max_symbols:
            raise AlphabetError(
                f"input has {distinct} distinct symbols, a container holds at most "
                f"{self.config.max_symbols}"
            )

    def _encode(self, data):
        data = as_symbols(data) if data else b""
        self._check_alphabet(data)
        payload = self.logic.encode(data + bytes([self.config.sentinel]))
        return data, payload, write_container(payload.code, payload.bits, self.config)

    def _stats(self, data, payload, compressed):
        counts = self.logic.freq_table(data) or {}
        total = len(data)
        entropy = 0.0
        content_bits = 0
        for symbol, n in counts.items():
            p = n / total
            entropy -= p * math.log2(p)
            content_bits += n * len(payload.code[symbol])

        header_bits = 8 * (len(self.config.magic) + 1 + 2 * len(payload.code))
        code_bits = sum(len(path) for path in payload.code.values())
        return CompressionStats(
            input_size=total,
            compressed_size=len(compressed),
            alphabet_size=len(counts),
            content_bits=content_bits,
            padding_bits=8 * len(compressed) - header_bits - code_bits - len(payload.bits),
            average_code_length=content_bits / total if total else 0.0,
            entropy=entropy,
        )

    def compress(self, data):
        data, payload, compressed = self._encode(data)
        logger.info(
            "compressed %d bytes -> %d bytes (%d symbols)",
            len(data), len(compressed), len(payload.code) - 1,
        )
        return compressed

    def decompress(self, data):
        container = read_container(data, self.config)
        decoded = self.logic.decode(
            container.code, container.bits, sentinel=self.config.sentinel
        )
        logger.info("decompressed %d bytes -> %d bytes", len(data), len(decoded))
        return decoded

    def stats(self, data):
        return self._stats(*self._encode(data))

    def compress_file(self, src, dst):
        with open(src, "rb") as f:
            data = f.read()
        data, payload, compressed = self._encode(data)
        with open(dst, "wb") as f:
            f.write(compressed)

        stats = self._stats(data, payload, compressed)
        logger.info(
            "%s: %d bytes -> %s: %d bytes, %.2f%% reduction",
            src, stats.input_size, dst, stats.compressed_size, stats.reduction,
        )
        return stats

    def decompress_file(self, src, dst):
        with open(src, "rb") as f:
            data = f.read()
        decoded = self.decompress(data)
        with open(dst, "wb") as f:
            f.write(decoded)
        return len(decoded)
