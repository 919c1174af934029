"""Predicates, rule builders and combinators.

These are pure functions with no I/O; both the sync and the aio
traversers evaluate them the same way.
"""

from .predicate import (
    PathInfo,
    Rule,
    evaluate_rules,
    format_trace,
)
from .builders import (
    within_dir,
    exclude_dir,
    with_extension,
    immediate_children_of_dir,
    exclude_immediate_children_of_dir,
    with_absolute_path_matching_regexp,
    with_name_matching_regexp,
    custom_rule,
)
from .combinators import (
    and_rules,
    and_not_rules,
    or_rules,
    inverse_rule,
    inverse_rules,
)

__all__ = [
    # Primitives
    'PathInfo',
    'Rule',
    'evaluate_rules',
    'format_trace',
    # Builders
    'within_dir',
    'exclude_dir',
    'with_extension',
    'immediate_children_of_dir',
    'exclude_immediate_children_of_dir',
    'with_absolute_path_matching_regexp',
    'with_name_matching_regexp',
    'custom_rule',
    # Combinators
    'and_rules',
    'and_not_rules',
    'or_rules',
    'inverse_rule',
    'inverse_rules',
]
