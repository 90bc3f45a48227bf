from .coder import CodingTree, EncodedMessage, HuffmanCoder, decode, encode
from .counter import count_characters
from .errors import (
    CorruptStream,
    HuffmanError,
    InvalidCodeTable,
    InvalidInput,
    MissingCode,
    PaddingAmbiguity,
)
from .tree import HuffmanTree, Internal, Leaf, Traverser

__all__ = [
    "CodingTree",
    "CorruptStream",
    "EncodedMessage",
    "HuffmanCoder",
    "HuffmanError",
    "HuffmanTree",
    "Internal",
    "InvalidCodeTable",
    "InvalidInput",
    "Leaf",
    "MissingCode",
    "PaddingAmbiguity",
    "Traverser",
    "count_characters",
    "decode",
    "encode",
]
