import logging

import more_itertools as _more_itertools

logger = logging.getLogger(__name__)

__all__ = [
    'filter_duplicates',
    'fold_unique',
    'position',
    ]


def position(x, iterable):
    """Index of the first element equal to `x`, None when missing.

    Uses equality only, so unhashable elements are fine.

    >>> position('b', ['a', 'b', 'c'])
    1
    >>> position([1], [[0], [1]])
    1
    >>> position('z', ['a', 'b']) is None
    True
    """
    for i, item in enumerate(iterable):
        if item == x:
            return i
    return None


def fold_unique(iterable):
    """Drop duplicates with a right-to-left fold.

    The input is walked from the right and an element is kept only if the
    accumulator does not already hold an equal one, so of any run of equal
    elements the rightmost survives, at its own position.

    >>> fold_unique(['a', 'b', 'a'])
    ('b', 'a')
    >>> fold_unique([9, 0, 2, 1, 0])
    (9, 2, 1, 0)
    >>> fold_unique(x % 3 for x in range(5))
    (2, 0, 1)

    Unhashable items work since membership is by linear scan.

    >>> fold_unique(([1, 2], [2, 3], [1, 2]))
    ([2, 3], [1, 2])
    """
    kept = []
    for item in _more_itertools.always_reversible(iterable):
        if position(item, kept) is None:
            kept.append(item)
    kept.reverse()
    return tuple(kept)


def filter_duplicates(iterable):
    """Deduplicate a sequence without building a container.

    Same right-to-left fold as `fold_unique`, returned as a list.

    >>> filter_duplicates(['a', 'b', 'a'])
    ['b', 'a']
    >>> filter_duplicates([])
    []
    """
    return list(fold_unique(iterable))


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
