# src/todo_cli/tasks/task_filters.py

from __future__ import annotations

import re
from collections.abc import Callable

from ..errors import InvalidPattern

NameMatcher = Callable[[str], bool]
# Predicate over task names; the store never cares how it matches.


def compile_name_matcher(pattern: str) -> NameMatcher:
    """
    Compile a regular expression into a name predicate.

    Matching is a search anywhere in the name (anchor with ^...$ for exact names).
    """
    try:
        rx = re.compile(pattern)
    except re.error as exc:
        raise InvalidPattern(pattern, str(exc)) from exc

    def _match(name: str) -> bool:
        return rx.search(name) is not None

    return _match


def match_all(_name: str) -> bool:
    return True
