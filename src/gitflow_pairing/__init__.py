"""GitFlow Pairing - credit co-authors and issue ids in commit messages."""

from ._version import __version__
from .core.rewriter import MessageRewriter, rewrite_message
from .models import Developer, RepositoryConfig

__all__ = [
    "__version__",
    "Developer",
    "MessageRewriter",
    "RepositoryConfig",
    "rewrite_message",
]
