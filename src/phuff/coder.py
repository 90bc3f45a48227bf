from collections.abc import Iterator
from dataclasses import dataclass

from loguru import logger

from .counter import count_characters
from .errors import InvalidInput, MissingCode, PaddingAmbiguity
from .log import configure_logging
from .tree import HuffmanTree
from .utils.bitstream import BITS_PER_GROUP, BitStream, pack_bits, padding_for


@dataclass(frozen=True)
class EncodedMessage:
    """Result of encoding a message.

    The packed bytes do not say where the padding starts, so ``bit_length``
    has to travel with them to the decoder.
    """

    codes: dict[str, str]
    packed: bytes
    bit_length: int

    @property
    def padding(self) -> int:
        return padding_for(self.bit_length)

    # codes is a dict, so instances are not hashable
    __hash__ = None

    # Unpacks as (codes, packed)
    def __iter__(self) -> Iterator:
        yield self.codes
        yield self.packed


class HuffmanCoder:
    def __init__(self, is_logging: bool | None = None) -> None:
        # None leaves the loguru sinks of the caller untouched
        if is_logging is not None:
            configure_logging(is_logging)

    def encode(self, message: str) -> EncodedMessage:
        logger.info("The encoding has started")
        coding_tree = CodingTree(message, coder=self)
        logger.info(
            f"Encoded {len(message)} characters into {coding_tree.bit_length} bits ({len(coding_tree.bits)} bytes)"
        )
        return EncodedMessage(coding_tree.codes, coding_tree.bits, coding_tree.bit_length)

    def pack(self, message: str, codes: dict[str, str]) -> tuple[bytes, int]:
        """Concatenates the code of every character and packs it into bytes.

        Returns the packed bytes and the number of real (non-padding) bits.
        """
        chunks: list[str] = []
        for character in message:
            code = codes.get(character)
            if code is None:
                logger.error(f"No code for character {character!r}")
                raise MissingCode(character)
            chunks.append(code)
        return pack_bits("".join(chunks))

    def decode(self, packed: bytes, codes: dict[str, str], bit_length: int | None = None) -> str:
        """Decodes packed bytes with a tree rebuilt from ``codes``.

        Only the first ``bit_length`` bits are read. Without ``bit_length``
        every bit is read, so padding bits that happen to complete a code
        are decoded as characters.
        """
        logger.info("The decoding has started")

        available = len(packed) * BITS_PER_GROUP
        if bit_length is None:
            logger.warning("No bit length given, padding bits will be read as code bits")
            bit_length = available
            strict = False
        elif not available - BITS_PER_GROUP < bit_length <= available:
            logger.error(f"Bit length {bit_length} does not fit {len(packed)} packed bytes")
            raise PaddingAmbiguity(f"bit length {bit_length} does not fit {len(packed)} packed bytes")
        else:
            strict = True

        traverser = HuffmanTree.from_codes(codes).traverser()
        bit_stream = BitStream(packed)
        characters: list[str] = []
        for _ in range(bit_length):
            traverser.traverse(bit_stream.read_bit())
            if traverser.is_leaf():
                characters.append(traverser.character)
                traverser.reset()

        if not traverser.at_root():
            if strict:
                logger.error(f"The last of {bit_length} bits ends inside a code")
                raise PaddingAmbiguity(f"stream ends inside a code after {bit_length} bits")
            logger.info("Dropped the trailing bits of an incomplete code")

        logger.info(f"The decoding has completed successfully ({len(characters)} characters)")
        return "".join(characters)


class CodingTree:
    """Eagerly encodes ``message`` and keeps every intermediate result."""

    def __init__(self, message: str, coder: HuffmanCoder | None = None) -> None:
        if not message:
            logger.error("Cannot encode an empty message")
            raise InvalidInput("empty message")

        self._coder = coder if coder is not None else HuffmanCoder()
        self.counts = count_characters(message)
        self.codes = HuffmanTree.from_frequencies(self.counts).generate_codes()
        self.bits, self.bit_length = self._coder.pack(message, self.codes)

    def decode(self, bits: bytes, codes: dict[str, str], bit_length: int | None = None) -> str:
        return self._coder.decode(bits, codes, bit_length)


def encode(message: str) -> EncodedMessage:
    return HuffmanCoder().encode(message)


def decode(packed: bytes, codes: dict[str, str], bit_length: int | None = None) -> str:
    return HuffmanCoder().decode(packed, codes, bit_length)
