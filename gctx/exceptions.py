"""Custom exceptions for gctx."""


class GctxError(Exception):
    """Base exception for all gctx errors."""

    pass


class StoreError(GctxError):
    """Raised when the profile store reports a failure."""

    pass


class UnknownProfile(StoreError):
    """Raised when a profile does not exist in the store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'no profile named "{name}"')


class NoPreviousContext(GctxError):
    """Raised when toggling back without a recorded previous profile."""

    def __init__(self):
        super().__init__("no previous profile found")


class NameCollision(GctxError):
    """Raised when a rename target already exists and force was not given."""

    def __init__(self, old_name: str, new_name: str):
        self.old_name = old_name
        self.new_name = new_name
        super().__init__(
            f'cannot rename "{old_name}" to "{new_name}": profile "{new_name}" already exists '
            f"(use --force to overwrite it)"
        )


class ContextRecordError(GctxError):
    """Raised when the previous-profile record cannot be read or written."""

    pass


class InvalidProfileName(GctxError):
    """Raised when a profile name is empty or contains a path separator."""

    pass
