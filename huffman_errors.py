# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for everything the codec raises on bad input."""


class FormatMismatchError(HuffmanError):
    """The buffer does not start with the container magic number."""


class MalformedBitstreamError(HuffmanError):
    """The header or bitstream is truncated or corrupt."""


class PrefixConflictError(MalformedBitstreamError):
    """A code table where one code is a prefix of another."""


class AlphabetError(HuffmanError, ValueError):
    """Input holds symbols that cannot be stored in a container."""
