"""Exception types raised by the contextforge lifecycle engine."""

from typing import Any


class ContextforgeError(Exception):
    """Base class for all contextforge errors."""


class ConfigurationError(ContextforgeError):
    """A context, searcher or the settings are missing a required piece."""


class ContextStateError(ContextforgeError):
    """An ActionContext was mutated in a way the pipeline forbids."""


class HookRegistryFrozenError(ContextforgeError):
    """A hook was registered after its registry was frozen."""


class MissingTargetError(ContextforgeError, ValueError):
    """An action that needs a target received neither ``id`` nor ``object``."""


class UnauthorizedError(ContextforgeError):
    """A policy predicate refused the action.

    Attributes:
        actor: The acting principal the policy was built for
        action: Name of the refused action (create, destroy, index, ...)
        subject: The resolved object or scope the policy inspected
    """

    def __init__(self, actor: Any, action: str, subject: Any = None):
        self.actor = actor
        self.action = action
        self.subject = subject
        super().__init__(f"Not authorized to {action}")
