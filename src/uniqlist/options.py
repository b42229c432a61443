import logging
from dataclasses import dataclass, fields
from functools import partial, wraps

logger = logging.getLogger(__name__)

__all__ = ['ListOptions', 'load_options']


@dataclass
class ListOptions:
    """Behaviour switches for the positional inserts.

    warn_displaced: log a warning when an insert drops an earlier
    occurrence of the inserted element
    """

    warn_displaced: bool = False

    @classmethod
    def from_config(cls, path: str, config=None):
        """Build options from a dotted attribute path on a config object

        >>> from types import SimpleNamespace
        >>> cfg = SimpleNamespace(lists=SimpleNamespace(nav={'warn_displaced': True}))
        >>> ListOptions.from_config('lists.nav', cfg)
        ListOptions(warn_displaced=True)
        """
        this = config
        for level in path.split('.'):
            this = getattr(this, level)
        return cls(**this)


def load_options(func=None, *, cls=ListOptions):
    """Wrapper that resolves the `options` keyword of an operation.

    Standard interface:
        options: str | dict | ListOptions | None
        config: object holding options under a dotted path (for str options)
        kwargs: option fields may also be passed directly

    >>> from types import SimpleNamespace
    >>> cfg = SimpleNamespace(app=SimpleNamespace(history={'warn_displaced': True}))

    >>> @load_options
    ... def testfunc(x, options=None):
    ...     return x, options.warn_displaced

    >>> testfunc(1)
    (1, False)
    >>> testfunc(1, warn_displaced=True)
    (1, True)
    >>> testfunc(1, options={'warn_displaced': True})
    (1, True)
    >>> testfunc(1, options='app.history', config=cfg)
    (1, True)
    """
    if func is None:
        return partial(load_options, cls=cls)

    @wraps(func)
    def wrapper(*args, options: str | dict | ListOptions | None = None, config=None, **kw):
        if isinstance(options, dict):
            options = cls(**options)
        if isinstance(options, str):
            options = cls.from_config(options, config=config)
        names = {field.name for field in fields(cls)}
        if options is None:
            options = cls(**{k: kw.pop(k) for k in list(kw) if k in names})
        for name in names:
            kw.pop(name, None)
        return func(*args, options=options, **kw)
    return wrapper


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
