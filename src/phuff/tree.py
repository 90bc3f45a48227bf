import heapq
import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self, TypeAlias

from loguru import logger

from .errors import CorruptStream, InvalidCodeTable, InvalidInput


@dataclass(slots=True)
class Leaf:
    character: str
    weight: int = 0


@dataclass(slots=True)
class Internal:
    # Children are only None while a tree is being rebuilt from a code table.
    left: "Node | None" = None
    right: "Node | None" = None
    weight: int = 0

    def child(self, bit: int) -> "Node | None":
        return self.right if bit else self.left

    def attach(self, bit: int, node: "Node") -> None:
        if bit:
            self.right = node
        else:
            self.left = node


Node: TypeAlias = Leaf | Internal


class HuffmanTree:
    """Binary Huffman tree.

    Built either bottom-up from a frequency table (encoding side) or by
    replaying the paths of a code table (decoding side). The tree is never
    modified once a constructor has returned.
    """

    def __init__(self, root: Node) -> None:
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    @classmethod
    def from_frequencies(cls, counts: dict[str, int]) -> Self:
        """Merges the two lightest nodes until one is left.

        The first node popped becomes the left child. Nodes of equal weight
        are popped in insertion order: leaves in the iteration order of
        ``counts``, then merged nodes in the order they were created.
        """
        if not counts:
            logger.error("Cannot build a Huffman tree from an empty frequency table")
            raise InvalidInput("empty frequency table")

        sequence = itertools.count()
        heap: list[tuple[int, int, Node]] = [
            (count, next(sequence), Leaf(character, count))
            for character, count in counts.items()
        ]
        heapq.heapify(heap)

        while len(heap) > 1:
            left_weight, _, left = heapq.heappop(heap)
            right_weight, _, right = heapq.heappop(heap)
            merged = Internal(left, right, left_weight + right_weight)
            heapq.heappush(heap, (merged.weight, next(sequence), merged))

        logger.debug(f"Built a Huffman tree over {len(counts)} symbols (total weight {heap[0][0]})")
        return cls(heap[0][2])

    @classmethod
    def from_codes(cls, codes: dict[str, str]) -> Self:
        """Rebuilds the tree described by the paths of a code table.

        Raises InvalidCodeTable if the table is empty, holds a malformed
        entry, or is not prefix-free.
        """
        if not codes:
            logger.error("Cannot rebuild a Huffman tree from an empty code table")
            raise InvalidCodeTable("empty code table")

        root = Internal()
        for character, code in codes.items():
            if len(character) != 1:
                logger.error(f"Code table key {character!r} is not a single character")
                raise InvalidCodeTable(f"key {character!r} is not a single character")
            if not code or code.strip("01"):
                logger.error(f"Invalid code {code!r} for {character!r}")
                raise InvalidCodeTable(f"invalid code {code!r} for {character!r}")

            current = root
            bits = [int(bit) for bit in code]
            for bit in bits[:-1]:
                match current.child(bit):
                    case None:
                        # Create an intermediate node
                        child = Internal()
                        current.attach(bit, child)
                    case Leaf(character=other):
                        logger.error(f"Code of {other!r} is a prefix of {code!r} ({character!r})")
                        raise InvalidCodeTable(f"code of {other!r} is a prefix of {code!r}")
                    case Internal() as child:
                        pass
                current = child

            if current.child(bits[-1]) is not None:
                logger.error(f"Code {code!r} ({character!r}) collides with another code")
                raise InvalidCodeTable(f"code {code!r} for {character!r} is not prefix-free")
            current.attach(bits[-1], Leaf(character))

        return cls(root)

    def _walk(self) -> Iterator[tuple[Leaf, str]]:
        def walk(node: Node | None, path: str) -> Iterator[tuple[Leaf, str]]:
            match node:
                case Leaf():
                    yield node, path
                case Internal(left=left, right=right):
                    yield from walk(left, path + "0")
                    yield from walk(right, path + "1")

        # A lone leaf at the root still needs a one-bit code.
        if isinstance(self._root, Leaf):
            yield self._root, "0"
        else:
            yield from walk(self._root, "")

    def generate_codes(self) -> dict[str, str]:
        return {leaf.character: path for leaf, path in self._walk()}

    @property
    def height(self) -> int:
        return max(len(path) for _, path in self._walk())

    def weighted_path_length(self) -> int:
        return sum(leaf.weight * len(path) for leaf, path in self._walk())

    def traverser(self) -> "Traverser":
        return Traverser(self)

    def print(self) -> None:
        def print_tree(node: Node | None, start_depth: int) -> None:
            match node:
                case Leaf(character=character, weight=weight):
                    print(f'{" " * 4 * start_depth} -> [{character!r}: {weight}]')
                case Internal(left=left, right=right, weight=weight):
                    print_tree(right, start_depth + 1)
                    print(f'{" " * 4 * start_depth} -> [{weight}]')
                    print_tree(left, start_depth + 1)

        print_tree(self._root, 0)


class Traverser:
    """Cursor walking a HuffmanTree one bit at a time."""

    def __init__(self, tree: HuffmanTree) -> None:
        self._tree = tree
        self._current: Node = tree.root

    def traverse(self, bit: int) -> None:
        match self._current:
            case Internal() as node:
                child = node.child(bit)
            case Leaf():
                child = None
        if child is None:
            logger.error(f"Bit {bit} leads off the Huffman tree")
            raise CorruptStream(f"bit {bit} does not continue any code")
        self._current = child

    def is_leaf(self) -> bool:
        return isinstance(self._current, Leaf)

    def at_root(self) -> bool:
        return self._current is self._tree.root

    @property
    def character(self) -> str:
        if not isinstance(self._current, Leaf):
            raise ValueError("The traverser is not on a leaf")
        return self._current.character

    def reset(self) -> None:
        self._current = self._tree.root
