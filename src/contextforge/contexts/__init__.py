"""Action contexts wrapping persistence with policies and hooks."""

from contextforge.contexts.base import BaseContext, entrypoint, hook_point
from contextforge.contexts.build import BuildContext
from contextforge.contexts.create import CREATE, CreateContext
from contextforge.contexts.crud import CRUDContext
from contextforge.contexts.destroy import DESTROY, DestroyContext
from contextforge.contexts.index import IndexContext
from contextforge.contexts.mutating import ChangeContext, MutatingAction
from contextforge.contexts.show import ShowContext
from contextforge.contexts.types import ActionContext
from contextforge.contexts.update import UPDATE, UpdateContext

__all__ = [
    "CREATE",
    "DESTROY",
    "UPDATE",
    "ActionContext",
    "BaseContext",
    "BuildContext",
    "CRUDContext",
    "ChangeContext",
    "CreateContext",
    "DestroyContext",
    "IndexContext",
    "MutatingAction",
    "ShowContext",
    "UpdateContext",
    "entrypoint",
    "hook_point",
]
