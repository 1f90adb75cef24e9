class InvariantViolation(Exception):
    """Raised when a domain rule about catalogs, blocks or variants is broken."""
