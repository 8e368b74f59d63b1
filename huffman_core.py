# filename: huffman_core.py

from collections import Counter, namedtuple

from huffman_errors import AlphabetError, MalformedBitstreamError, PrefixConflictError
from huffman_queue import PriorityQueue

LEFT = "0"
RIGHT = "1"

# code: symbol -> bit string, bits: concatenated codes, count: symbols encoded
HuffmanCoding = namedtuple("HuffmanCoding", ["code", "bits", "count"])


class Leaf:
    __slots__ = ("symbol", "freq")

    def __init__(self, symbol, freq=0):
        self.symbol = symbol
        self.freq = freq

    def is_leaf(self):
        return True

    def traverse(self, path):
        return {self.symbol: path}

    def leaves(self):
        yield self

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.freq})"


class Branch:
    __slots__ = ("freq", "left", "right")

    def __init__(self, freq=0, left=None, right=None):
        if left is not None and right is not None and freq != left.freq + right.freq:
            raise ValueError(
                f"branch frequency {freq} != {left.freq} + {right.freq}"
            )
        self.freq = freq
        self.left = left
        self.right = right

    def is_leaf(self):
        return False

    def child(self, direction):
        return self.left if direction == LEFT else self.right

    def ensure_child(self, direction):
        """Return the branch below ``direction``, creating an empty one if the slot is free."""
        node = self.child(direction)
        if node is None:
            node = Branch()
            self._set(direction, node)
        elif node.is_leaf():
            raise PrefixConflictError(
                f"code for {node.symbol!r} is a prefix of another code"
            )
        return node

    def set_leaf(self, direction, leaf):
        occupant = self.child(direction)
        if occupant is not None:
            if occupant.is_leaf():
                raise PrefixConflictError(
                    f"symbols {occupant.symbol!r} and {leaf.symbol!r} share a code"
                )
            raise PrefixConflictError(
                f"code for {leaf.symbol!r} is a prefix of another code"
            )
        self._set(direction, leaf)

    def _set(self, direction, node):
        if direction == LEFT:
            self.left = node
        else:
            self.right = node

    def traverse(self, path):
        codes = {}
        for direction, node in ((LEFT, self.left), (RIGHT, self.right)):
            if node is not None:
                codes.update(node.traverse(path + direction))
        return codes

    def leaves(self):
        for node in (self.left, self.right):
            if node is not None:
                yield from node.leaves()

    def __repr__(self):
        return f"Branch({self.freq}, {self.left!r}, {self.right!r})"


def as_symbols(data):
    """Return ``data`` as bytes; text is taken as latin-1 code units."""
    if isinstance(data, str):
        try:
            return data.encode("latin-1")
        except UnicodeEncodeError as e:
            raise AlphabetError(
                f"character {data[e.start]!r} does not fit in one byte"
            ) from None
    return bytes(data)


def as_symbol(symbol):
    """Return a table key as a byte value; one-character text is taken as latin-1."""
    if isinstance(symbol, str) and len(symbol) == 1:
        symbol = ord(symbol)
    if not isinstance(symbol, int) or not 0 <= symbol <= 0xFF:
        raise AlphabetError(f"symbol {symbol!r} is not a single byte")
    return symbol


class HuffmanLogic:
    def freq_table(self, data):
        if not data:
            return None
        return dict(Counter(as_symbols(data)))

    def build_tree(self, freq_table):
        if not freq_table:
            return None
        counts = Counter()
        for symbol, freq in freq_table.items():
            counts[as_symbol(symbol)] += freq
        # Leaves go in by symbol value; ties then resolve by insertion order
        queue = PriorityQueue(Leaf(symbol, freq) for symbol, freq in sorted(counts.items()))

        # Iteratively merge the two lightest nodes
        while queue.size() > 1:
            left = queue.extract_min()
            right = queue.extract_min()
            queue.insert(Branch(left.freq + right.freq, left, right))

        return queue.extract_min()

    def generate_codes(self, node):
        if node is None:
            return {}
        return node.traverse("")

    def encode(self, data):
        if not data:
            return None
        symbols = as_symbols(data)
        tree = self.build_tree(self.freq_table(symbols))
        codes = self.generate_codes(tree)
        bits = "".join([codes[symbol] for symbol in symbols])
        return HuffmanCoding(codes, bits, len(symbols))

    def tree_from_codes(self, code):
        if not code:
            raise MalformedBitstreamError("code table is empty")
        normalized = {as_symbol(symbol): path for symbol, path in code.items()}
        if len(normalized) != len(code):
            raise PrefixConflictError("code table lists the same symbol twice")
        code = normalized

        if len(code) == 1:
            (symbol, path), = code.items()
            if path == "":
                return Leaf(symbol, 0)

        root = Branch()
        for symbol, path in code.items():
            if path == "":
                raise PrefixConflictError(
                    f"empty code for {symbol!r} in a table of {len(code)} symbols"
                )
            node = root
            for direction in path[:-1]:
                node = node.ensure_child(direction)
            node.set_leaf(path[-1], Leaf(symbol, 0))
        return root

    def decode(self, code, bits, count=None, sentinel=None):
        tree = self.tree_from_codes(code)

        if tree.is_leaf():
            # a single symbol has an empty code, so the bits carry no length
            if tree.symbol == sentinel:
                return b""
            if count is None:
                raise MalformedBitstreamError(
                    "cannot decode a single-symbol code without a symbol count"
                )
            return bytes([tree.symbol]) * count

        out = bytearray()
        if count == 0:
            return bytes(out)

        node = tree
        for position, bit in enumerate(bits):
            node = node.left if bit == LEFT else node.right
            if node is None:
                raise MalformedBitstreamError(
                    f"bit {position} walks off the tree: no code matches"
                )
            if node.is_leaf():
                if node.symbol == sentinel:
                    return bytes(out)
                out.append(node.symbol)
                if count is not None and len(out) == count:
                    return bytes(out)
                node = tree

        if sentinel is not None:
            raise MalformedBitstreamError("bitstream ended before the end marker")
        if node is not tree:
            raise MalformedBitstreamError("bitstream ended in the middle of a code")
        if count is not None and len(out) != count:
            raise MalformedBitstreamError(
                f"decoded {len(out)} symbols, expected {count}"
            )
        return bytes(out)

    def decode_payload(self, payload):
        return self.decode(payload.code, payload.bits, payload.count)
