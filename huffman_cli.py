#!/usr/bin/env python3
"""
Command line front end for the Huffman container codec.

Run with:
    huffman-codec compress notes.txt notes.hf
    huffman-codec decompress notes.hf notes.txt
    huffman-codec stats notes.txt
"""
import argparse
import logging
import sys

from huffman_errors import HuffmanError
from huffman_service import HuffmanService

logger = logging.getLogger("huffman_cli")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman-codec", description="Compress and decompress files with Huffman coding"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    compress = commands.add_parser("compress", help="Write a compressed container")
    compress.add_argument("input", help="File to compress")
    compress.add_argument("output", help="Container file to write")

    decompress = commands.add_parser("decompress", help="Restore a compressed container")
    decompress.add_argument("input", help="Container file to read")
    decompress.add_argument("output", help="File to write the restored data to")

    stats = commands.add_parser("stats", help="Show compression statistics for a file")
    stats.add_argument("input", help="File to analyse")
    return parser


def print_stats(stats):
    print(f"Input size:     {stats.input_size} bytes")
    print(f"Compressed:     {stats.compressed_size} bytes")
    print(f"Reduction:      {stats.reduction:.2f}%")
    print(f"Alphabet:       {stats.alphabet_size} symbols")
    print(f"Content bits:   {stats.content_bits} (+{stats.padding_bits} padding)")
    print(f"Average code:   {stats.average_code_length:.4f} bits per symbol")
    print(f"Entropy:        {stats.entropy:.4f} bits per symbol")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    service = HuffmanService()
    try:
        if args.command == "compress":
            service.compress_file(args.input, args.output)
        elif args.command == "decompress":
            service.decompress_file(args.input, args.output)
        else:
            with open(args.input, "rb") as f:
                data = f.read()
            print_stats(service.stats(data))
    except (HuffmanError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
