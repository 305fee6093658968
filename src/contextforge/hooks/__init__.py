"""contextforge hook pipeline.

Hooks are callables attached to named phases of an action:
- setup / setup_<action>: before the target is resolved
- before_change / before_<action>: after authorization, before persisting
- after_<action>_success / after_change_success: persistence returned true
- after_<action>_failure / after_change_failure: persistence returned false
- after_<action> / after_change: always, once persistence has completed

Usage:
    @ContactCreate.before_create
    def stamp_owner(ctx):
        ctx.object.owner_id = ctx.actor.id
        return ctx
"""

from contextforge.hooks.registry import HookRegistry, hook
from contextforge.hooks.types import HOOK_POINTS, HookEntry, HookFn

__all__ = [
    "HOOK_POINTS",
    "HookEntry",
    "HookFn",
    "HookRegistry",
    "hook",
]
