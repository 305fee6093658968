"""Model adapters normalizing ORM objects behind one interface.

Usage:
    from contextforge.adapters import BaseAdapter

    class SQLAdapter(BaseAdapter):
        def instantiate(self, **attributes):
            return type(self)(self.unwrap()(**attributes))
        ...
"""

from contextforge.adapters.base import BaseAdapter, subject_class, unwrap

__all__ = [
    "BaseAdapter",
    "subject_class",
    "unwrap",
]
