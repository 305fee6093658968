"""CRUDContext: every action on one class."""

from contextforge.contexts.create import CreateContext
from contextforge.contexts.destroy import DestroyContext
from contextforge.contexts.index import IndexContext
from contextforge.contexts.show import ShowContext
from contextforge.contexts.update import UpdateContext


class CRUDContext(CreateContext, UpdateContext, DestroyContext, ShowContext, IndexContext):
    pass
