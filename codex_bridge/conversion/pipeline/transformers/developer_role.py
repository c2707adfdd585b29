"""Developer role transformer."""

from codex_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from codex_bridge.core.constants import Constants


class DeveloperRoleTransformer(RequestTransformer):
    """Rewrites system-role input items to the developer role.

    Codex rejects "system" inside ``input``. Items without a role, and every
    other role, are left as they are.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        items = context.target.get("input")
        if not isinstance(items, list):
            return context

        converted = [
            {**item, "role": Constants.ROLE_DEVELOPER}
            if isinstance(item, dict) and item.get("role") == Constants.ROLE_SYSTEM
            else item
            for item in items
        ]
        return context.with_target({**context.target, "input": converted})
