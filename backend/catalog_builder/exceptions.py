class RecordNotFound(LookupError):
    """The requested row does not exist or is not owned by the caller."""

    def __init__(self, entity_type: str, entity_id):
        super().__init__(f"{entity_type.capitalize()} not found: {entity_id}")
        self.entity_type = entity_type
        self.entity_id = entity_id


class CatalogDuplicationError(RuntimeError):
    """
    The duplicate catalog row was created but copying its blocks failed.
    The partial catalog is left in place for the caller to handle.
    """

    def __init__(self, catalog_id: str, message: str = "Catalog was created but its blocks could not be copied"):
        super().__init__(message)
        self.catalog_id = catalog_id
