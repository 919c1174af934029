"""Predicate primitives.

A predicate answers one question about one path. When ``info.is_dir`` is
False it is asked "should this file be included in the results?". When
``info.is_dir`` is True it is asked "could this directory contain any
files that should be included?", and returning False prunes the whole
subtree.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, Optional


class PathInfo(NamedTuple):
    """Everything a predicate gets to look at."""

    absolute_path: str
    is_dir: bool
    root_dir: str


PredicateFn = Callable[[PathInfo], bool]
TraceSink = Callable[[str], None]


@dataclass(frozen=True)
class Rule:
    """A predicate paired with the name shown in trace output.

    Attributes:
        predicate: Callable taking a PathInfo and returning a bool
        name: Display name, used only for tracing
    """

    predicate: PredicateFn
    name: str = "customRule"

    def __call__(self, info: PathInfo) -> bool:
        return bool(self.predicate(info))


def format_trace(rule: Rule, info: PathInfo, result: bool) -> str:
    """Format one trace record for a single predicate evaluation."""
    return (
        f"{rule.name}: absolute_path={info.absolute_path} "
        f"is_dir={info.is_dir} root_dir={info.root_dir} -> {result}"
    )


def evaluate_rules(
    rules: Iterable[Rule],
    info: PathInfo,
    trace: Optional[TraceSink] = None
) -> bool:
    """Evaluate rules left to right, stopping at the first False.

    Args:
        rules: Rules to evaluate, in order
        info: The path being asked about
        trace: Optional sink receiving one record per evaluated rule

    Returns:
        True if every rule passed (an empty sequence always passes)
    """
    for rule in rules:
        result = rule(info)
        if trace is not None:
            trace(format_trace(rule, info, result))
        if not result:
            return False
    return True
