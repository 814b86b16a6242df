import secrets
import string

# Printable set accepted by the identity provider and easy to read back
PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*"

# Identity provider rejects anything shorter
MIN_PASSWORD_LENGTH = 6
DEFAULT_PASSWORD_LENGTH = 12


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """Generate a random password, never shorter than MIN_PASSWORD_LENGTH."""
    length = max(length, MIN_PASSWORD_LENGTH)
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
