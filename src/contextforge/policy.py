"""Policy base class: per-action authorization predicates.

A policy is built for one actor and one subject (an object or a scope) and
answers ``can_<action>()``. Every predicate denies by default.

Usage:
    class ContactPolicy(Policy):
        def can_create(self) -> bool:
            return self.actor is not None

        def can_destroy(self) -> bool:
            return self.is_subject(Contact) and self.subject.owner_id == self.actor.id
"""

from typing import Any

from contextforge.adapters.base import subject_class

ACTIONS = ("index", "show", "create", "update", "destroy")


class Policy:
    """Authorization gate for one actor and one subject."""

    class Scope:
        """Narrows a collection to what the actor may see. Returns it unchanged by default."""

        def __init__(self, scope: Any, actor: Any):
            self.scope = scope
            self.actor = actor

        def resolve(self) -> Any:
            return self.scope

    def __init__(self, actor: Any, subject: Any):
        self.actor = actor
        self.subject = subject

    @property
    def subject_class(self) -> type:
        """Domain type of the subject, looking through adapter wrappers."""
        return subject_class(self.subject)

    def is_subject(self, cls: type) -> bool:
        return self.subject_class is cls

    def allows(self, action: str) -> bool:
        """Evaluate ``can_<action>()``; unknown actions are denied."""
        predicate = getattr(self, f"can_{action}", None)
        if predicate is None:
            return False
        return bool(predicate())

    def can_index(self) -> bool:
        return False

    def can_show(self) -> bool:
        return False

    def can_create(self) -> bool:
        return False

    def can_update(self) -> bool:
        return False

    def can_destroy(self) -> bool:
        return False
