from collections.abc import Iterable

from toolz import frequencies


# Keys keep first-occurrence order, which the tree relies on for tie-breaking.
def count_characters(message: Iterable[str]) -> dict[str, int]:
    return dict(frequencies(message))
