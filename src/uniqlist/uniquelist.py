import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from uniqlist.iterutils import fold_unique, position
from uniqlist.log import class_logger
from uniqlist.options import ListOptions, load_options
from uniqlist.typingutils import TriState

logger = logging.getLogger(__name__)

__all__ = [
    'UniqueList',
    'empty',
    'from_sequence',
    'to_sequence',
    'length',
    'is_empty',
    'member',
    'is_first',
    'is_before',
    'is_after',
    'remove',
    'cons',
    'append',
    'add_before',
    'add_after',
    'reverse',
]


@class_logger
class UniqueList(Sequence):
    """An immutable sequence in which no two elements are equal.

    Elements only need to support ``==``; membership and positions are
    found by linear scan, so unhashable values are allowed. Every
    operation returns a new list and leaves the receiver untouched.

    Building from a sequence resolves duplicates with a right-to-left
    fold: the rightmost of equal elements is the one kept.

    Examples

    Construction:
    >>> UniqueList(['a', 'b', 'a'])
    UniqueList(['b', 'a'])
    >>> UniqueList()
    UniqueList()

    Positional inserts:
    >>> ul = UniqueList(['a', 'c', 'd'])
    >>> ul.add_before('c', 'b')
    UniqueList(['a', 'b', 'c', 'd'])
    >>> ul.add_after('a', 'b')
    UniqueList(['a', 'b', 'c', 'd'])

    Order queries answer None when an element is missing:
    >>> ul.is_before('c', 'a')
    True
    >>> ul.is_before('z', 'a') is None
    True
    """

    __slots__ = ('_items',)

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        """Initialize from an optional iterable, dropping duplicates.

        Parameters
            iterable: Elements to add, any iterable (generators included)
        """
        self._items = () if iterable is None else fold_unique(iterable)

    @classmethod
    def _from_unique(cls, items: Iterable[Any]) -> 'UniqueList':
        this = cls.__new__(cls)
        this._items = tuple(items)
        return this

    @classmethod
    def empty(cls) -> 'UniqueList':
        """Return a list with no elements."""
        return cls._from_unique(())

    @classmethod
    def from_sequence(cls, iterable: Iterable[Any]) -> 'UniqueList':
        """Build a list from any iterable, see `fold_unique` for how
        duplicates are resolved.

        >>> UniqueList.from_sequence([1, 2, 1, 3])
        UniqueList([2, 1, 3])
        """
        return cls(iterable)

    def to_list(self) -> list[Any]:
        """Return the elements as a plain list, in order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._from_unique(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __contains__(self, x: Any) -> bool:
        return position(x, self._items) is not None

    def index(self, x: Any, start: int = 0, stop: int | None = None) -> int:
        """Position of `x`, raises ValueError when missing."""
        for i in range(len(self._items))[start:stop]:
            if self._items[i] == x:
                return i
        raise ValueError(f'{x!r} is not in list')

    def count(self, x: Any) -> int:
        return int(x in self)

    def __eq__(self, other: Any) -> bool:
        """Two lists are equal when they hold equal elements in the same order."""
        if isinstance(other, UniqueList):
            return self._items == other._items
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        if not self:
            return f'{self.__class__.__name__}()'
        return f'{self.__class__.__name__}({list(self._items)!r})'

    def is_empty(self) -> bool:
        return not self._items

    def is_first(self, x: Any) -> TriState:
        """Whether `x` is the head of the list.

        Only the head is compared: a non-empty list that does not hold `x`
        gives False. The answer is None only for an empty list.

        >>> UniqueList(['x', 'y']).is_first('z')
        False
        >>> UniqueList().is_first('z') is None
        True
        """
        if not self._items:
            return None
        return self._items[0] == x

    def is_before(self, target: Any, candidate: Any) -> TriState:
        """Whether `candidate` comes strictly earlier than `target`.

        Parameters
            target: The element to compare against
            candidate: The element whose position is tested

        Returns
            None if either element is missing, otherwise True when the
            index of `candidate` is lower than the index of `target`. An
            element is never before itself.
        """
        target_pos = position(target, self._items)
        candidate_pos = position(candidate, self._items)
        if target_pos is None or candidate_pos is None:
            return None
        return candidate_pos < target_pos

    def is_after(self, target: Any, candidate: Any) -> TriState:
        """Whether `candidate` comes strictly later than `target`,
        `is_before` with the arguments swapped.

        >>> UniqueList(['a', 'b']).is_after('a', 'b')
        True
        """
        return self.is_before(candidate, target)

    def remove(self, x: Any) -> 'UniqueList':
        """Return a copy without `x`, a missing `x` is not an error."""
        return self._from_unique(item for item in self._items if not item == x)

    def cons(self, x: Any) -> 'UniqueList':
        """Move `x` to the front, adding it if missing.

        >>> UniqueList(['y', 'x', 'z']).cons('x')
        UniqueList(['x', 'y', 'z'])
        """
        return self._from_unique((x, *self.remove(x)))

    def append(self, x: Any) -> 'UniqueList':
        """Move `x` to the back, adding it if missing.

        >>> UniqueList(['y', 'x', 'z']).append('x')
        UniqueList(['y', 'z', 'x'])
        """
        return self._from_unique((*self.remove(x), x))

    @load_options
    def add_before(self, target: Any, new: Any, *, options: ListOptions | None = None) -> 'UniqueList':
        """Insert `new` immediately before `target`.

        The element equal to `target` is replaced by ``[new, target]`` and
        the result is rebuilt with the deduplicating constructor. When
        `new` is already present elsewhere the rebuild keeps only its
        rightmost occurrence, which may be the old one:

        >>> UniqueList(['t', 'a', 'n']).add_before('t', 'n')
        UniqueList(['t', 'a', 'n'])

        Parameters
            target: Element to insert in front of
            new: Element to insert
            options: `ListOptions`, dict, dotted config path or None

        Returns
            The same list if `new` equals `target`, a rebuilt copy if
            `target` is missing, the list with `new` inserted otherwise
        """
        if new == target:
            return self
        return self._insert(target, new, (new, target), options)

    @load_options
    def add_after(self, target: Any, new: Any, *, options: ListOptions | None = None) -> 'UniqueList':
        """Insert `new` immediately after `target`.

        Mirror of `add_before`, the element equal to `target` is replaced
        by ``[target, new]`` before the rebuild.

        >>> UniqueList(['a', 'b', 'd']).add_after('b', 'c')
        UniqueList(['a', 'b', 'c', 'd'])
        """
        if new == target:
            return self
        return self._insert(target, new, (target, new), options)

    def _insert(self, target, new, pair, options):
        if target not in self:
            if self._should_log_debug():
                self.logger.debug(f'{target!r} not found, rebuilding without insert')
        elif new in self:
            if options.warn_displaced:
                self.logger.warning(f'{new!r} already present, rebuild keeps its rightmost occurrence')
            elif self._should_log_debug():
                self.logger.debug(f'{new!r} already present, rebuild keeps its rightmost occurrence')
        rebuilt = []
        for item in self._items:
            rebuilt.extend(pair if item == target else (item,))
        return self.from_sequence(rebuilt)

    def reverse(self) -> 'UniqueList':
        """Return a copy in reverse order."""
        return self._from_unique(reversed(self._items))


def empty():
    return UniqueList.empty()


def from_sequence(seq):
    return UniqueList.from_sequence(seq)


def to_sequence(ul):
    return ul.to_list()


def length(ul):
    return len(ul)


def is_empty(ul):
    return ul.is_empty()


def member(x, ul):
    return x in ul


def is_first(x, ul):
    return ul.is_first(x)


def is_before(target, candidate, ul):
    """True if `candidate` is earlier than `target` in `ul`, None if
    either is missing

    >>> is_before('Brandenberg', 'Bavaria', from_sequence(['Bavaria', 'Brandenberg']))
    True
    """
    return ul.is_before(target, candidate)


def is_after(target, candidate, ul):
    """`is_before` with swapped arguments: True if `candidate` is later
    than `target`
    """
    return is_before(candidate, target, ul)


def remove(x, ul):
    return ul.remove(x)


def cons(x, ul):
    return ul.cons(x)


def append(x, ul):
    return ul.append(x)


def add_before(target, new, ul, **kw):
    return ul.add_before(target, new, **kw)


def add_after(target, new, ul, **kw):
    return ul.add_after(target, new, **kw)


def reverse(ul):
    return ul.reverse()


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
