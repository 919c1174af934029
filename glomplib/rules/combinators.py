"""Boolean algebra over rule sequences.

A rule sequence is an AND: every rule has to pass. The combinators here
take and return tuples of Rules so that a Glomp can snapshot another
Glomp's rules without caring what happens to it afterwards.

Directory handling is the subtle part. An inverted rule never prunes a
directory, because "this directory is not inside X" says nothing about
whether files that satisfy the inverted rule live further down. ``or``
does no such special casing: a directory is entered only when one side's
whole chain agrees to enter it.
"""

from typing import Sequence, Tuple

from .predicate import PathInfo, Rule, evaluate_rules

Rules = Tuple[Rule, ...]


def and_rules(left: Sequence[Rule], right: Sequence[Rule]) -> Rules:
    """Rules that pass only where both ``left`` and ``right`` pass."""
    return tuple(left) + tuple(right)


def inverse_rule(rule: Rule) -> Rule:
    """Negate ``rule`` for files; always descend into directories."""
    def inverted(info: PathInfo) -> bool:
        # Still traverse into directories, only invert the answer for files.
        if info.is_dir:
            return True
        return not rule(info)

    return Rule(inverted, f"not({rule.name})")


def inverse_rules(rules: Sequence[Rule]) -> Rules:
    """Invert each rule of ``rules`` individually.

    The result is the AND of the negations, not the negation of the AND.
    Use ``or_rules`` first to collapse a chain into a single rule when the
    latter is wanted.
    """
    return tuple(inverse_rule(rule) for rule in rules)


def and_not_rules(left: Sequence[Rule], right: Sequence[Rule]) -> Rules:
    """Shorthand for ``and_rules(left, inverse_rules(right))``."""
    return and_rules(left, inverse_rules(right))


def or_rules(left: Sequence[Rule], right: Sequence[Rule]) -> Rules:
    """A single rule passing where either whole chain passes.

    Applied identically to files and directories.
    """
    left = tuple(left)
    right = tuple(right)

    def either(info: PathInfo) -> bool:
        if evaluate_rules(left, info):
            return True
        return evaluate_rules(right, info)

    name = "or({}, {})".format(
        " & ".join(r.name for r in left) or "*",
        " & ".join(r.name for r in right) or "*",
    )
    return (Rule(either, name),)
