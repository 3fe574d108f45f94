"""
Rich-text bodies (action_text_rich_texts).

Card descriptions and comment contents do not live on their own rows; the
schema keeps them in a shared rich-text table keyed by
(record_type, record_id, name).
"""

from typing import Any

from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.records import id_param

INSERT_RICH_TEXT = """
INSERT INTO action_text_rich_texts (
    id, account_id, record_type, record_id, name, body, created_at, updated_at
)
VALUES (UNHEX(?), UNHEX(?), ?, UNHEX(?), ?, ?, ?, ?)
""".strip()

UPDATE_RICH_TEXT = """
UPDATE action_text_rich_texts
SET body = ?, updated_at = ?
WHERE account_id = UNHEX(?) AND record_type = ? AND record_id = UNHEX(?) AND name = ?
""".strip()


async def insert_rich_text(
    client: Any,
    account_id: FizzyId,
    record_type: str,
    record_id: FizzyId,
    name: str,
    body: str,
    timestamp: str,
) -> FizzyId:
    rich_text_id = FizzyId.generate()
    await client.execute_raw(
        INSERT_RICH_TEXT,
        id_param(rich_text_id),
        id_param(account_id),
        record_type,
        id_param(record_id),
        name,
        body,
        timestamp,
        timestamp,
    )
    return rich_text_id


async def upsert_rich_text(
    client: Any,
    account_id: FizzyId,
    record_type: str,
    record_id: FizzyId,
    name: str,
    body: str,
    timestamp: str,
) -> None:
    updated = await client.execute_raw(
        UPDATE_RICH_TEXT,
        body,
        timestamp,
        id_param(account_id),
        record_type,
        id_param(record_id),
        name,
    )
    if not updated:
        await insert_rich_text(
            client, account_id, record_type, record_id, name, body, timestamp
        )
