"""ID generation utilities."""

import secrets
import string


def generate_nanoid(length: int = 21) -> str:
    """
    Generate a nanoid-style ID.

    Args:
        length: Length of the ID to generate

    Returns:
        A string ID made of letters (A-Z, a-z), digits, underscores and hyphens
    """
    alphabet = string.ascii_letters + string.digits + "_-"
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_transaction_id() -> str:
    """Generate a transaction ID used to correlate docker invocations."""
    return generate_nanoid(21)
