"""Sequential frontier traversal.

Walks the tree breadth-first from a root directory, asking the rules
whether to descend into each subdirectory and whether to report each
file. Fully synchronous: one stat or listdir at a time.
"""

import os
import stat as stat_module
from collections import deque
from typing import List, Optional, Sequence, Tuple

from .._common.error_policies import ContinueOnErrorsPolicy, ErrorPolicy
from .._common.paths import check_root
from ..errors import ExpectedDirectoryError
from ..rules.predicate import PathInfo, Rule, TraceSink, evaluate_rules


class FrontierTraverser:
    """Breadth-first search over an explicit FIFO frontier.

    Directories are popped from the front of the frontier, their passing
    subdirectories pushed to the back, so results come out level by level
    and, within a directory, in listing order.
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        error_policy: Optional[ErrorPolicy] = None,
        trace: Optional[TraceSink] = None
    ):
        """Initialize traverser.

        Args:
            rules: Rules to evaluate for every entry
            error_policy: Policy for stat/listdir failures (skips by default)
            trace: Optional sink for per-rule trace records
        """
        self.rules = tuple(rules)
        self.error_policy = error_policy or ContinueOnErrorsPolicy()
        self.trace = trace

    def find_matches(self, root_dir: str) -> List[str]:
        """Search ``root_dir`` and return matching file paths in discovery order."""
        root_dir = check_root(root_dir)

        frontier = deque([root_dir])
        matches: List[str] = []

        while frontier:
            directory = frontier.popleft()
            subdirs, files = self.process_directory(directory, root_dir)
            frontier.extend(subdirs)
            matches.extend(files)

        return matches

    def process_directory(self, directory: str, root_dir: str) -> Tuple[List[str], List[str]]:
        """Stat and list one directory.

        Returns:
            Tuple of (subdirectories to descend into, matching files)
        """
        subdirs: List[str] = []
        files: List[str] = []

        try:
            dir_stat = os.stat(directory)
        except OSError as e:
            self.error_policy.handle(e, 'stat_dir', directory)
            return subdirs, files

        if not stat_module.S_ISDIR(dir_stat.st_mode):
            raise ExpectedDirectoryError(directory)

        try:
            children = sorted(os.listdir(directory))
        except OSError as e:
            self.error_policy.handle(e, 'list_dir', directory)
            return subdirs, files

        for child in children:
            child_path = os.path.join(directory, child)

            try:
                child_stat = os.stat(child_path)
            except OSError as e:
                self.error_policy.handle(e, 'stat_entry', child_path)
                continue

            is_dir = stat_module.S_ISDIR(child_stat.st_mode)
            if not evaluate_rules(self.rules, PathInfo(child_path, is_dir, root_dir), self.trace):
                continue
            if is_dir:
                subdirs.append(child_path)
            else:
                files.append(child_path)

        return subdirs, files


def find_matches_sync(
    root_dir: str,
    rules: Sequence[Rule] = (),
    error_policy: Optional[ErrorPolicy] = None,
    trace: Optional[TraceSink] = None
) -> List[str]:
    """Synchronously find files under ``root_dir`` matching ``rules``.

    Args:
        root_dir: Absolute path of the directory to search
        rules: Rules every reported file has to satisfy
        error_policy: Policy for stat/listdir failures
        trace: Optional sink for per-rule trace records

    Returns:
        Absolute paths of matching files. Directories are never returned.
    """
    traverser = FrontierTraverser(rules, error_policy=error_policy, trace=trace)
    return traverser.find_matches(root_dir)
