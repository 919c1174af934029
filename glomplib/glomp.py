"""The Glomp rule set.

A Glomp holds an ordered tuple of rules plus the directory searches start
from. Every rule-adding method returns a new Glomp and leaves the
original untouched, so one Glomp can safely serve as the base for several
others:

    >>> sources = glomp("/project").exclude_dir("node_modules")
    >>> python = sources.with_extension("py")
    >>> tests = python.within_dir("tests")

Run ``await g.find_matches()`` or ``g.find_matches_sync()`` to search.
Only paths to files are returned, never directories.
"""

import os
from typing import Iterator, List, Optional, Sequence

from ._common.config import SearchConfig
from ._common.paths import PathLike
from .aio.traverser import AsyncFrontierTraverser
from .rules import builders, combinators
from .rules.builders import RegexLike
from .rules.predicate import PredicateFn, Rule, TraceSink
from .sync.traverser import FrontierTraverser


class Glomp:
    """An immutable set of rules for finding files.

    Attributes:
        rules: Tuple of Rules, all of which must pass
        root_dir: Absolute directory searched when no root is passed
        trace: Optional callable receiving one message per rule evaluation
        config: Concurrency and error handling settings
    """

    def __init__(
        self,
        root_dir: Optional[PathLike] = None,
        rules: Sequence[Rule] = (),
        trace: Optional[TraceSink] = None,
        config: Optional[SearchConfig] = None
    ):
        """Initialize a Glomp.

        Args:
            root_dir: Directory to search by default (defaults to the cwd).
                Relative paths are made absolute against the cwd.
            rules: Initial rules
            trace: Optional trace sink
            config: Search configuration (defaults to lenient error handling)
        """
        if root_dir is None:
            root_dir = os.getcwd()
        self.root_dir = os.path.abspath(os.fspath(root_dir))
        self.rules = tuple(rules)
        self.trace = trace
        self.config = config or SearchConfig()

    def _derive(self, rules: Sequence[Rule]) -> 'Glomp':
        return Glomp(self.root_dir, rules, trace=self.trace, config=self.config)

    def _append(self, rule: Rule) -> 'Glomp':
        return self._derive(self.rules + (rule,))

    # === Rule builders ===

    def within_dir(self, some_dir: PathLike) -> 'Glomp':
        """Only include files within ``some_dir``.

        Relative paths are resolved against the root directory of the
        search. Pass an absolute path if that isn't wanted.
        """
        return self._append(builders.within_dir(some_dir))

    def exclude_dir(self, some_dir: PathLike) -> 'Glomp':
        """Exclude files within ``some_dir`` and never descend into it."""
        return self._append(builders.exclude_dir(some_dir))

    def with_extension(self, extension: str) -> 'Glomp':
        """Only include files with ``extension`` (with or without the leading dot)."""
        return self._append(builders.with_extension(extension))

    def exclude_extension(self, extension: str) -> 'Glomp':
        """Exclude files with ``extension``.

        Built as the inverse of ``with_extension``, so it never prunes
        directories.
        """
        return self._derive(combinators.and_not_rules(
            self.rules, (builders.with_extension(extension),)
        ))

    def immediate_children_of_dir(self, some_dir: PathLike) -> 'Glomp':
        """Only include files directly inside ``some_dir``.

        Files in subdirectories of ``some_dir`` are not included; use
        ``within_dir`` for those.
        """
        return self._append(builders.immediate_children_of_dir(some_dir))

    def exclude_immediate_children_of_dir(self, some_dir: PathLike) -> 'Glomp':
        """Exclude files directly inside ``some_dir``.

        Files in subdirectories of ``some_dir`` are still included; use
        ``exclude_dir`` to drop everything below it.
        """
        return self._append(builders.exclude_immediate_children_of_dir(some_dir))

    def with_absolute_path_matching_regexp(self, regexp: RegexLike) -> 'Glomp':
        """Only include files whose absolute path matches ``regexp``."""
        return self._append(builders.with_absolute_path_matching_regexp(regexp))

    def with_name_matching_regexp(self, regexp: RegexLike) -> 'Glomp':
        """Only include files whose name matches ``regexp``."""
        return self._append(builders.with_name_matching_regexp(regexp))

    def custom_rule(self, predicate: PredicateFn, name: Optional[str] = None) -> 'Glomp':
        """Add a rule of your own.

        ``predicate`` is called with a ``PathInfo(absolute_path, is_dir,
        root_dir)`` for every file and directory met during the search.

        When ``is_dir`` is False, the question is "should this file be
        included in the results?".

        When ``is_dir`` is True, the question is "could this directory
        contain any files that should be included?". Returning False
        means the directory's contents are never searched.

        Args:
            predicate: Callable taking a PathInfo and returning a bool
            name: Name shown in trace output
        """
        return self._append(builders.custom_rule(predicate, name))

    # === Combinators ===

    def and_(self, other: 'Glomp') -> 'Glomp':
        """Match files satisfying both this Glomp's rules and ``other``'s."""
        return self._derive(combinators.and_rules(self.rules, other.rules))

    def and_not(self, other: 'Glomp') -> 'Glomp':
        """Match files satisfying this Glomp's rules but not ``other``'s.

        Same as ``self.and_(other.inverse())``.
        """
        return self._derive(combinators.and_not_rules(self.rules, other.rules))

    def or_(self, other: 'Glomp') -> 'Glomp':
        """Match files satisfying either this Glomp's rules or ``other``'s."""
        return self._derive(combinators.or_rules(self.rules, other.rules))

    def inverse(self) -> 'Glomp':
        """Invert every rule of this Glomp.

        Directories are always descended into by an inverted rule.
        """
        return self._derive(combinators.inverse_rules(self.rules))

    # === Configuration ===

    def with_trace(self, trace: Optional[TraceSink]) -> 'Glomp':
        """Return a copy sending one message per rule evaluation to ``trace``."""
        return Glomp(self.root_dir, self.rules, trace=trace, config=self.config)

    def with_config(self, config: SearchConfig) -> 'Glomp':
        """Return a copy using ``config`` for searches.

        Raises:
            ValueError: If the configuration is invalid
        """
        errors = config.validate()
        if errors:
            raise ValueError("Invalid search configuration: " + "; ".join(errors))
        return Glomp(self.root_dir, self.rules, trace=self.trace, config=config)

    # === Execution ===

    async def find_matches(
        self,
        root_dir: Optional[PathLike] = None,
        *,
        concurrency: Optional[int] = None
    ) -> List[str]:
        """Asynchronously search for files matching this Glomp's rules.

        Several directories are scanned concurrently; the result is still
        ordered exactly as ``find_matches_sync`` would order it.

        Args:
            root_dir: Absolute directory to search (defaults to ``self.root_dir``)
            concurrency: Maximum directories scanned at once
                (defaults to the config value, else CPUs - 1)

        Returns:
            Absolute paths of matching files. Directories are never returned.

        Raises:
            InvalidRootError: If ``root_dir`` is not absolute
            ExpectedDirectoryError: If ``root_dir`` is not a directory
        """
        traverser = AsyncFrontierTraverser(
            self.rules,
            concurrency=self.config.resolved_concurrency(concurrency),
            error_policy=self.config.resolved_error_policy(),
            trace=self.trace
        )
        return await traverser.find_matches(self._search_root(root_dir))

    def find_matches_sync(self, root_dir: Optional[PathLike] = None) -> List[str]:
        """Synchronously search for files matching this Glomp's rules.

        Args:
            root_dir: Absolute directory to search (defaults to ``self.root_dir``)

        Returns:
            Absolute paths of matching files. Directories are never returned.

        Raises:
            InvalidRootError: If ``root_dir`` is not absolute
            ExpectedDirectoryError: If ``root_dir`` is not a directory
        """
        traverser = FrontierTraverser(
            self.rules,
            error_policy=self.config.resolved_error_policy(),
            trace=self.trace
        )
        return traverser.find_matches(self._search_root(root_dir))

    def _search_root(self, root_dir: Optional[PathLike]) -> str:
        if root_dir is None:
            return self.root_dir
        return os.fspath(root_dir)

    # === Introspection ===

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self.rules)
        return f"Glomp(root_dir={self.root_dir!r}, rules=[{names}])"


def glomp(root_dir: Optional[PathLike] = None) -> Glomp:
    """Create an empty Glomp searching ``root_dir`` (defaults to the cwd).

    An empty Glomp matches every file and descends into every directory.
    """
    return Glomp(root_dir)
