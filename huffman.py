import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

ALPHABET_SIZE = 256
SENTINEL_KEY = 0 # priority key for nodes without a symbol (NUL)


class HuffmanError(Exception):
    pass

class MissingCodeError(HuffmanError, LookupError):
    pass

class InvalidBitError(HuffmanError, ValueError):
    pass

class TruncatedStreamError(HuffmanError, ValueError):
    pass

class CorruptStreamError(HuffmanError, ValueError):
    pass


class Node: # Node for Huffman tree
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol    # byte, or None for internal/placeholder nodes
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def _key(self):
        return (self.weight, SENTINEL_KEY if self.symbol is None else self.symbol)

    def __lt__(self, other):
        return self._key() < other._key() # weight first, symbol value breaks ties

    def __repr__(self):
        if self.is_leaf():
            return f"Node(symbol={self.symbol!r}, weight={self.weight})"
        return f"Node(weight={self.weight}, left={self.left!r}, right={self.right!r})"


@dataclass(frozen=True)
class EncodedResult:
    root: Optional[Node]
    bits: str

    @property
    def bit_length(self) -> int:
        return len(self.bits)

    @property
    def packed_size(self) -> int:
        # bytes these bits would take if packed 8 per byte
        return (len(self.bits) + 7) // 8


def build_frequency_table(data: bytes) -> List[int]:
    freq = [0] * ALPHABET_SIZE
    for b in data:
        freq[b] += 1
    return freq

def build_huffman_tree(freq: List[int]) -> Optional[Node]: # freq: 256 counts indexed by byte value
    priority_queue = [Node(symbol, count) for symbol, count in enumerate(freq) if count > 0]
    heapq.heapify(priority_queue)

    # One distinct symbol -> add a placeholder so the root has a branch to take
    if len(priority_queue) == 1:
        heapq.heappush(priority_queue, Node(None, 1))

    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue)
        right = heapq.heappop(priority_queue)
        heapq.heappush(priority_queue, Node(None, left.weight + right.weight, left, right))

    return priority_queue[0] if priority_queue else None

def generate_huffman_codes(root: Optional[Node]) -> Dict[int, str]:
    codes = {}
    if root is None:
        return codes

    # explicit stack: skewed trees can be 255 levels deep
    stack = [(root, '')]
    while stack:
        node, current_code = stack.pop()
        if node.is_leaf():
            if node.symbol is not None: # placeholder leaf has no code
                codes[node.symbol] = current_code
            continue
        stack.append((node.right, current_code + '1'))
        stack.append((node.left, current_code + '0'))

    return codes

def huffman_encode(data: bytes, code_map: Dict[int, str]) -> str:
    try:
        return ''.join(code_map[byte] for byte in data)
    except KeyError as e:
        raise MissingCodeError(f"no code for byte {e.args[0]}") from None

def huffman_decode(bitstring: str, root: Optional[Node]) -> bytes:
    if not bitstring:
        return b''
    if root is None:
        raise CorruptStreamError("cannot decode a non-empty bit-string without a tree")
    if root.is_leaf():
        raise CorruptStreamError("tree root is a lone leaf, it has no branches to follow")

    decoded_bytes = bytearray()
    current_node = root
    for position, bit in enumerate(bitstring):
        if bit == '0':
            current_node = current_node.left
        elif bit == '1':
            current_node = current_node.right
        else:
            raise InvalidBitError(f"invalid bit {bit!r} at position {position}")

        if current_node.is_leaf():
            if current_node.symbol is None:
                raise CorruptStreamError(f"bit-string reaches the placeholder leaf at position {position}")
            decoded_bytes.append(current_node.symbol)
            current_node = root

    if current_node is not root:
        raise TruncatedStreamError(f"bit-string ends inside a code after {len(bitstring)} bits")
    return bytes(decoded_bytes)


def compress(data: bytes) -> EncodedResult:
    freq = build_frequency_table(data)
    root = build_huffman_tree(freq)
    code_map = generate_huffman_codes(root)
    return EncodedResult(root, huffman_encode(data, code_map))

def decompress(result: EncodedResult) -> bytes:
    return huffman_decode(result.bits, result.root)


# Tree/code statistics

def tree_depth(root: Optional[Node]) -> int:
    if root is None:
        return 0
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        depth = max(depth, level)
        if not node.is_leaf():
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth

def leaf_count(root: Optional[Node]) -> int:
    if root is None:
        return 0
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            count += 1
        else:
            stack.extend((node.left, node.right))
    return count

def average_code_length(freq: List[int], code_map: Dict[int, str]) -> float:
    """Expected bits per input byte under code_map."""
    total = sum(freq)
    if total == 0:
        return 0.0
    return sum(freq[symbol] * len(code) for symbol, code in code_map.items()) / total

def entropy(freq: List[int]) -> float:
    """Shannon entropy of the byte distribution, in bits per byte."""
    total = sum(freq)
    if total == 0:
        return 0.0
    return -sum((c / total) * math.log2(c / total) for c in freq if c > 0)
