import os
import sys

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest

from huffman_cli import main


def test_compress_then_decompress(tmp_path):
    src = tmp_path / "notes.txt"
    packed = tmp_path / "notes.hf"
    restored = tmp_path / "notes.out"
    src.write_bytes(b"she sells sea shells by the sea shore\n" * 20)

    assert main(["compress", str(src), str(packed)]) == 0
    assert packed.read_bytes()[:2] == b"hf"
    assert main(["decompress", str(packed), str(restored)]) == 0
    assert restored.read_bytes() == src.read_bytes()


def test_stats_prints_report(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    src.write_bytes(b"abracadabra")

    assert main(["stats", str(src)]) == 0
    out = capsys.readouterr().out
    assert "Input size:     11 bytes" in out
    assert "Alphabet:       5 symbols" in out
    assert "Reduction:" in out


def test_bad_container_fails(tmp_path):
    src = tmp_path / "bogus.hf"
    src.write_bytes(b"not a container")
    assert main(["decompress", str(src), str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()


def test_missing_input_fails(tmp_path):
    assert main(["compress", str(tmp_path / "missing"), str(tmp_path / "out")]) == 1


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
