from typing import Optional

from catalog_builder.extensions import db
from catalog_builder.models.audit_log import AuditLog


def log_action(
    *,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    if not actor_id:
        return  # Skip logging for anonymous/system actions

    log = AuditLog()
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
