"""Factories turning simple parameters into Rules.

Relative directories are resolved against ``info.root_dir`` at evaluation
time, so the same Rule can be reused for searches rooted elsewhere.
"""

import os
import re
from typing import Optional, Union

from .._common.paths import PathLike, normalize_extension, parent_dir, resolve_path
from .predicate import PathInfo, PredicateFn, Rule

RegexLike = Union[str, "re.Pattern[str]"]


def within_dir(some_dir: PathLike) -> Rule:
    """Only files under ``some_dir`` match.

    Directories pass when they lead towards ``some_dir`` or lie inside it,
    so a deeply nested target is still reachable from the root. The test
    is a raw string prefix: ``/foo-bar`` is considered within ``/foo``.
    """
    def rule(info: PathInfo) -> bool:
        target = resolve_path(some_dir, info.root_dir)
        if info.is_dir:
            return info.absolute_path.startswith(target) or target.startswith(info.absolute_path)
        return info.absolute_path.startswith(target)

    return Rule(rule, f"withinDir({os.fspath(some_dir)!r})")


def exclude_dir(some_dir: PathLike) -> Rule:
    """Files under ``some_dir`` don't match, and ``some_dir`` is never entered."""
    def rule(info: PathInfo) -> bool:
        target = resolve_path(some_dir, info.root_dir)
        return not info.absolute_path.startswith(target)

    return Rule(rule, f"excludeDir({os.fspath(some_dir)!r})")


def with_extension(extension: str) -> Rule:
    """Only files ending in ``extension`` match. ``"txt"`` and ``".txt"`` are equivalent."""
    suffix = normalize_extension(extension)

    def rule(info: PathInfo) -> bool:
        if info.is_dir:
            return True
        return info.absolute_path.endswith(suffix)

    return Rule(rule, f"withExtension({suffix!r})")


def immediate_children_of_dir(some_dir: PathLike) -> Rule:
    """Only files directly inside ``some_dir`` match.

    Directories pass only while they are ``some_dir`` or one of its
    ancestors, so nothing below the target is ever listed.
    """
    def rule(info: PathInfo) -> bool:
        target = resolve_path(some_dir, info.root_dir)
        if info.is_dir:
            # Need to descend past here to find its children
            return target.startswith(info.absolute_path)
        return parent_dir(info.absolute_path) == target

    return Rule(rule, f"immediateChildrenOfDir({os.fspath(some_dir)!r})")


def exclude_immediate_children_of_dir(some_dir: PathLike) -> Rule:
    """Files directly inside ``some_dir`` don't match; deeper files still can."""
    def rule(info: PathInfo) -> bool:
        if info.is_dir:
            return True
        target = resolve_path(some_dir, info.root_dir)
        return parent_dir(info.absolute_path) != target

    return Rule(rule, f"excludeImmediateChildrenOfDir({os.fspath(some_dir)!r})")


def with_absolute_path_matching_regexp(regexp: RegexLike) -> Rule:
    """Only files whose absolute path matches ``regexp`` (``re.search``) match."""
    pattern = re.compile(regexp)

    def rule(info: PathInfo) -> bool:
        if info.is_dir:
            return True
        return pattern.search(info.absolute_path) is not None

    return Rule(rule, f"withAbsolutePathMatchingRegExp({pattern.pattern!r})")


def with_name_matching_regexp(regexp: RegexLike) -> Rule:
    """Only files whose base name matches ``regexp`` (``re.search``) match."""
    pattern = re.compile(regexp)

    def rule(info: PathInfo) -> bool:
        if info.is_dir:
            return True
        return pattern.search(os.path.basename(info.absolute_path)) is not None

    return Rule(rule, f"withNameMatchingRegExp({pattern.pattern!r})")


def custom_rule(predicate: PredicateFn, name: Optional[str] = None) -> Rule:
    """Wrap a caller-supplied predicate.

    Args:
        predicate: Callable taking a PathInfo and returning a bool
        name: Display name for tracing (defaults to the callable's name)
    """
    if isinstance(predicate, Rule):
        return predicate if name is None else Rule(predicate.predicate, name)
    if name is None:
        name = getattr(predicate, "__name__", None) or "customRule"
    return Rule(predicate, name)
