"""Domain exceptions."""

__all__ = ["PanelkitError", "PreconditionViolation"]


class PanelkitError(Exception):
    """Base class for all panelkit errors."""


class PreconditionViolation(PanelkitError, RuntimeError):
    """A lifecycle method was called in a state that does not allow it.

    Raised, for example, when ``show()`` is called on a component that has
    not been rendered yet, or when ``unmask()`` runs before any ``mask()``.
    This signals a defect in the calling code and is never caught internally.
    """
