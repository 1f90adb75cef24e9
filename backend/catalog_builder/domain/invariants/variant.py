from .exceptions import InvariantViolation


def assert_variant_combination(combination, option_ids):
    """
    A stored variant names exactly one value for every option of its product.
    """
    keys = set(combination)
    expected = set(option_ids)

    unknown = keys - expected
    if unknown:
        raise InvariantViolation(f"Variant references unknown options: {sorted(unknown)}")

    missing = expected - keys
    if missing:
        raise InvariantViolation(f"Variant is missing a value for options: {sorted(missing)}")
