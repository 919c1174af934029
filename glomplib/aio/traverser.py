"""Concurrent frontier traversal.

Same search as ``glomplib.sync.traverser.FrontierTraverser``, but several
directories are stat'ed and listed at once. Blocking filesystem calls run
in worker threads through ``asyncio.to_thread`` so each one is a
suspension point.

Directories finish in whatever order the filesystem answers. To keep the
output identical to the sync traverser, each directory's subdirectories
and matches are collected locally, then committed to the shared frontier
and result list strictly in the order the directories were dequeued.
"""

import asyncio
import os
import stat as stat_module
from collections import deque
from typing import List, Optional, Sequence, Tuple

from .._common.config import default_concurrency
from .._common.error_policies import ContinueOnErrorsPolicy, ErrorPolicy
from .._common.paths import check_root
from ..errors import ExpectedDirectoryError
from ..rules.predicate import PathInfo, Rule, TraceSink, evaluate_rules
from .jobs import run_jobs


class AsyncFrontierTraverser:
    """Breadth-first search processing up to ``concurrency`` directories at once."""

    def __init__(
        self,
        rules: Sequence[Rule],
        concurrency: Optional[int] = None,
        error_policy: Optional[ErrorPolicy] = None,
        trace: Optional[TraceSink] = None
    ):
        """Initialize traverser.

        Args:
            rules: Rules to evaluate for every entry
            concurrency: Maximum directories in flight (default: CPUs - 1)
            error_policy: Policy for stat/listdir failures (skips by default)
            trace: Optional sink for per-rule trace records
        """
        self.rules = tuple(rules)
        self.concurrency = concurrency if concurrency is not None else default_concurrency()
        self.error_policy = error_policy or ContinueOnErrorsPolicy()
        self.trace = trace

    async def find_matches(self, root_dir: str) -> List[str]:
        """Search ``root_dir`` and return matching file paths in discovery order."""
        root_dir = check_root(root_dir)

        frontier = deque([root_dir])
        matches: List[str] = []
        committed = 0
        turn = asyncio.Condition()

        async def visit(directory: str, index: int) -> None:
            nonlocal committed
            subdirs, files = await self.process_directory(directory, root_dir)

            async with turn:
                await turn.wait_for(lambda: committed == index)
                frontier.extend(subdirs)
                matches.extend(files)
                committed += 1
                turn.notify_all()

        await run_jobs(frontier, visit, self.concurrency)
        return matches

    async def process_directory(self, directory: str, root_dir: str) -> Tuple[List[str], List[str]]:
        """Stat and list one directory.

        Returns:
            Tuple of (subdirectories to descend into, matching files)
        """
        subdirs: List[str] = []
        files: List[str] = []

        try:
            dir_stat = await asyncio.to_thread(os.stat, directory)
        except OSError as e:
            self.error_policy.handle(e, 'stat_dir', directory)
            return subdirs, files

        if not stat_module.S_ISDIR(dir_stat.st_mode):
            raise ExpectedDirectoryError(directory)

        try:
            children = sorted(await asyncio.to_thread(os.listdir, directory))
        except OSError as e:
            self.error_policy.handle(e, 'list_dir', directory)
            return subdirs, files

        for child in children:
            child_path = os.path.join(directory, child)

            try:
                child_stat = await asyncio.to_thread(os.stat, child_path)
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


async def find_matches(
    root_dir: str,
    rules: Sequence[Rule] = (),
    concurrency: Optional[int] = None,
    error_policy: Optional[ErrorPolicy] = None,
    trace: Optional[TraceSink] = None
) -> List[str]:
    """Asynchronously find files under ``root_dir`` matching ``rules``.

    Args:
        root_dir: Absolute path of the directory to search
        rules: Rules every reported file has to satisfy
        concurrency: Maximum directories processed at once
        error_policy: Policy for stat/listdir failures
        trace: Optional sink for per-rule trace records

    Returns:
        Absolute paths of matching files, in the same order
        ``find_matches_sync`` returns them.
    """
    traverser = AsyncFrontierTraverser(
        rules,
        concurrency=concurrency,
        error_policy=error_policy,
        trace=trace
    )
    return await traverser.find_matches(root_dir)
