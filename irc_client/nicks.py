"""Nickname candidates for registration."""

import itertools


def nick_sequence(base, limit=None):
    """Yield *base*, then *base* followed by 2, 3, 4, …

    Parameters
    ----------
    base : str
        The preferred nickname.
    limit : int | None
        Maximum number of candidates; ``None`` means unbounded.
    """
    candidates = itertools.chain(
        [base], (f"{base}{n}" for n in itertools.count(2))
    )
    if limit is not None:
        candidates = itertools.islice(candidates, limit)
    yield from candidates
