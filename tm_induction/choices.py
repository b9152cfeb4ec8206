"""
Lazy enumeration of one-choice-per-slot combinations.
"""

from itertools import product
from math import prod
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar('T')


class ChoiceEnumerator(Generic[T]):
    """
    Every way of picking one option from each of a sequence of option lists.

    For example, the combinations of [[1, 2], [3, 4, 5]] are
    (1, 3), (1, 4), (1, 5), (2, 3), (2, 4), (2, 5): the first list varies
    slowest. Combinations are produced lazily, so only the option lists are
    held in memory, never the product. Each call to iter() starts an
    independent pass.
    """

    def __init__(self, option_lists: Iterable[Iterable[T]]):
        self.option_lists = tuple(tuple(options) for options in option_lists)

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return product(*self.option_lists)

    def __len__(self) -> int:
        return prod(len(options) for options in self.option_lists)

    def __repr__(self):
        sizes = 'x'.join(str(len(options)) for options in self.option_lists)
        return f"ChoiceEnumerator({sizes or 'empty'})"
