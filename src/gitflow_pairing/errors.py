"""Exception hierarchy for gitflow-pairing.

Every failure raised while rewriting a commit message is a ``PairingError``.
None of them are retried: the rewrite is pure text processing, so a failure
is reported to the caller once and the message file is left untouched.
"""


class PairingError(Exception):
    """Base class for all gitflow-pairing errors."""


class MalformedIdentityError(PairingError):
    """Raised when an identity string has no parseable ``<email>`` segment."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"malformed identity {identity.strip()!r}: expected 'Name <email>'")


class UnknownDeveloperError(PairingError):
    """Raised when a developer id is not present in the registry."""

    def __init__(self, developer_id: str, context: str = "") -> None:
        self.developer_id = developer_id
        self.context = context
        message = f"no dev with id {developer_id!r} found"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class UnresolvableRepositoryError(PairingError):
    """Raised when a working directory matches no configured repository."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"no repo with path {path} found")


class GitIdentityError(PairingError):
    """Raised when the author identity cannot be obtained from git."""


class HookInstallError(PairingError):
    """Raised when git hooks cannot be installed into a repository."""
