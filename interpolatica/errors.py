class InterpolaticaError(Exception):
    """Base class for errors raised by interpolatica."""


class EmptyInputError(InterpolaticaError, ValueError):
    """A sequence that must hold at least one value was empty."""


class ReconciliationError(InterpolaticaError, AssertionError):
    """Keyed list reconciliation reached a state its key maps rule out."""


class DuplicateKeyWarning(UserWarning):
    """Two elements of one list snapshot share an identity key."""
