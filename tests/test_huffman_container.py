import os
import sys

import pytest

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from huffman_bits import BitReader, pack_bits, unpack_bits
from huffman_config import HuffmanConfig
from huffman_container import read_container, write_container
from huffman_errors import FormatMismatchError, MalformedBitstreamError

AB_CONTAINER = bytes([0x68, 0x66, 0x03, 0x42, 0x01, 0x1F, 0x02, 0x41, 0x02, 0x5E, 0x80])


def test_pack_bits_msb_first_with_padding():
    assert pack_bits("1") == (b"\x80", 7)
    assert pack_bits("0101111010") == (b"\x5e\x80", 6)
    assert pack_bits("") == (b"", 0)


def test_pack_bits_aligned_has_no_padding():
    assert pack_bits("1111111100000001") == (b"\xff\x01", 0)


def test_unpack_bits_keeps_leading_zeros():
    assert unpack_bits(b"\x00\x05") == "0000000000000101"
    assert unpack_bits(b"") == ""


def test_bit_reader():
    reader = BitReader("1100101")
    assert reader.read(2) == "11"
    assert reader.read(0) == ""
    assert reader.remaining() == 5
    with pytest.raises(MalformedBitstreamError):
        reader.read(6)
    assert reader.rest() == "00101"
    assert reader.remaining() == 0


def test_write_container_layout():
    code = {0x42: "0", 0x1F: "10", 0x41: "11"}
    assert write_container(code, "11010") == AB_CONTAINER


def test_read_container():
    container = read_container(AB_CONTAINER)
    assert container.code == {0x42: "0", 0x1F: "10", 0x41: "11"}
    # content bits followed by the padding
    assert container.bits == "11010" + "000000"


def test_single_symbol_container():
    data = write_container({0x1F: ""}, "")
    assert data == b"\x68\x66\x01\x1f\x00"
    assert read_container(data).code == {0x1F: ""}


def test_custom_magic():
    config = HuffmanConfig(magic=b"HZ")
    data = write_container({1: "0", 2: "1"}, "01", config)
    assert data[:2] == b"HZ"
    assert read_container(data, config).code == {1: "0", 2: "1"}
    with pytest.raises(FormatMismatchError):
        read_container(data)


def test_config_validation():
    with pytest.raises(ValueError):
        HuffmanConfig(magic=b"abc")
    with pytest.raises(ValueError):
        HuffmanConfig(sentinel=256)


@pytest.mark.parametrize("data", [b"", b"\x68", b"\x00\x00\x03", b"\x66\x68\x01\x1f\x00"])
def test_bad_magic(data):
    with pytest.raises(FormatMismatchError):
        read_container(data)


@pytest.mark.parametrize("data", [
    # no symbol count
    b"\x68\x66",
    # zero symbols
    b"\x68\x66\x00",
    # code table cut short
    b"\x68\x66\x03\x42\x01\x1f",
    # code length beyond the available bits
    AB_CONTAINER[:4] + b"\xff" + AB_CONTAINER[5:],
    # repeated symbol
    AB_CONTAINER[:5] + b"\x42" + AB_CONTAINER[6:],
    # empty code in a multi-symbol table
    AB_CONTAINER[:4] + b"\x00" + AB_CONTAINER[5:],
    # single-symbol table with a non-empty code
    b"\x68\x66\x01\x1f\x01\x00",
])
def test_malformed_header(data):
    with pytest.raises(MalformedBitstreamError):
        read_container(data)
