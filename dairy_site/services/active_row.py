"""
At most one active row per table (discounts).

Activation is a single call to the ``set_active_row`` database function,
which deactivates every other row and activates the target inside one
transaction. The partial unique index ``... WHERE is_active`` backs it up
against concurrent admin sessions.
"""

import logging

from dairy_site.services.collections import CollectionClient, NotFoundError

logger = logging.getLogger(__name__)

SET_ACTIVE_FUNCTION = "set_active_row"
ACTIVE_COLUMN = "is_active"


async def set_active(client: CollectionClient, table: str, target_id: str) -> None:
    """Make ``target_id`` the only active row of ``table``. Idempotent."""
    activated = await client.rpc(
        SET_ACTIVE_FUNCTION,
        {"table_name": table, "target_id": target_id},
    )
    if activated is False:
        raise NotFoundError(f"No row '{target_id}' in '{table}'")
    logger.info(f"Activated {table}/{target_id}")


async def set_inactive(client: CollectionClient, table: str, target_id: str) -> None:
    await client.update(table, target_id, {ACTIVE_COLUMN: False})
    logger.info(f"Deactivated {table}/{target_id}")
