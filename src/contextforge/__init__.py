"""contextforge: policy-gated, hook-driven action contexts over any ORM.

Contexts wrap persistence calls with authorization checks, lifecycle hooks
and searcher delegation:

    from contextforge import CRUDContext, Policy, Searcher

    class ContactContext(CRUDContext):
        model_class = Contact
        policy_class = ContactPolicy
        searcher_class = ContactSearcher
        adapter_class = SQLAdapter

    @ContactContext.after_create_success
    def notify(ctx):
        ...

    ContactContext(user).create(params={"name": "Ada"})
"""

from contextforge.adapters import BaseAdapter
from contextforge.config import Settings, configure, get_settings
from contextforge.contexts import (
    ActionContext,
    BaseContext,
    BuildContext,
    CRUDContext,
    ChangeContext,
    CreateContext,
    DestroyContext,
    IndexContext,
    MutatingAction,
    ShowContext,
    UpdateContext,
)
from contextforge.errors import (
    ConfigurationError,
    ContextforgeError,
    ContextStateError,
    HookRegistryFrozenError,
    MissingTargetError,
    UnauthorizedError,
)
from contextforge.hooks import HookRegistry, hook
from contextforge.policy import Policy
from contextforge.searcher import Searcher

__version__ = "0.1.0"

__all__ = [
    "ActionContext",
    "BaseAdapter",
    "BaseContext",
    "BuildContext",
    "CRUDContext",
    "ChangeContext",
    "ConfigurationError",
    "ContextStateError",
    "ContextforgeError",
    "CreateContext",
    "DestroyContext",
    "HookRegistry",
    "HookRegistryFrozenError",
    "IndexContext",
    "MissingTargetError",
    "MutatingAction",
    "Policy",
    "Searcher",
    "Settings",
    "ShowContext",
    "UnauthorizedError",
    "UpdateContext",
    "configure",
    "get_settings",
    "hook",
]
