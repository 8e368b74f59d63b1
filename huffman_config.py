# filename: huffman_config.py

from dataclasses import dataclass

# "hf"
MAGIC = b"\x68\x66"

# ASCII Unit Separator, appended to the input as the end-of-content marker
SENTINEL = 0x1F


@dataclass(frozen=True)
class HuffmanConfig:
    magic: bytes = MAGIC
    sentinel: int = SENTINEL

    def __post_init__(self):
        if len(self.magic) != 2:
            raise ValueError(f"magic must be exactly 2 bytes, got {len(self.magic)}")
        if not 0 <= self.sentinel <= 0xFF:
            raise ValueError(f"sentinel must be a byte value, got {self.sentinel}")

    @property
    def max_symbols(self):
        # the symbol count is a single byte and one slot goes to the sentinel
        return 0xFF - 1


DEFAULT_CONFIG = HuffmanConfig()
