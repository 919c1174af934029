"""glomplib - composable rules for finding files.

Build up a set of rules, then search a directory tree for the files that
satisfy all of them:

    from glomplib import glomp

    g = glomp("/project").within_dir("src").with_extension("py")

Asynchronous:
    matches = await g.find_matches()

Synchronous:
    matches = g.find_matches_sync()

Both return the same absolute file paths in the same order.
"""

__version__ = "0.1.0"

from .glomp import Glomp, glomp
from .rules import PathInfo, Rule
from .errors import GlompError, InvalidRootError, ExpectedDirectoryError
from ._common import (
    SearchConfig,
    ErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
)

__all__ = [
    "__version__",
    # Rule set
    "glomp",
    "Glomp",
    "PathInfo",
    "Rule",
    # Configuration
    "SearchConfig",
    "ErrorPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    # Errors
    "GlompError",
    "InvalidRootError",
    "ExpectedDirectoryError",
]
