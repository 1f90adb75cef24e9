def normalize_block(block, admin=False):
    base = {
        "id": block.id,
        "type": block.type,
        "sort": block.sort,
        "visible": block.visible,
        "data": block.data or {},
        "navigation_label": block.navigation_label,
        "anchor_slug": block.anchor_slug,
    }

    if admin:
        base["catalog_id"] = block.catalog_id
        base["created_at"] = block.created_at.isoformat() if block.created_at else None
        base["updated_at"] = block.updated_at.isoformat() if block.updated_at else None

    return base
