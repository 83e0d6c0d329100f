# 2026-10-19  republish_utils/general.py

from typing import Optional


def report_counted_things(
        n: int,
        singular: str,
        plural: Optional[str] = None
        ) -> str:
    """
    (1, "version")                -> "(1 version)"
    (2, "version")                -> "(2 versions)"
    (0, "candidate")              -> "(0 candidate)"
    """
    assert n >= 0
    plural = plural or singular + 's'
    return f"({n} {singular if n <= 1 else plural})"


def strip_range_operator(version_str: str) -> str:
    """
    Drop leading range-operator characters from a dependency spec.
    '^11.0.0' -> '11.0.0', '~1.2.3' -> '1.2.3', '11.0.0' -> '11.0.0'.
    """
    return version_str.lstrip('^~')


def yellow_text(text: str) -> str:
    """ANSI coloring for yellow text."""
    return "\033[1;33m{:s}\033[0m".format(text)
