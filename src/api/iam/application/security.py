"""Security utilities for tenant API keys.

Provides secure secret generation, hashing, and verification for API keys.
Uses cryptographically secure random generation and bcrypt for hashing.
"""

import secrets

import bcrypt

API_KEY_PREFIX = "cq_"
PREFIX_LENGTH = 12


def generate_api_key_secret() -> str:
    """Generate a URL-safe API key with the cq_ prefix.

    Generates 32 bytes of cryptographically secure random data
    and encodes it as a URL-safe base64 string with the cq_ prefix,
    which makes keys easy to spot in secret scanners and logs.

    Returns:
        A URL-safe API key string (e.g., cq_abc123...)
    """
    # replace - with _ for ease of copy/paste. (Most IDEs will separate word selection at a `-`)
    random_part = secrets.token_urlsafe(32).replace("-", "_")
    return f"{API_KEY_PREFIX}{random_part}"


def is_well_formed(secret: str) -> bool:
    """Check whether a presented secret has the shape of an issued key.

    Args:
        secret: The presented API key

    Returns:
        True if the secret carries the key prefix and is long enough to
        contain a full lookup prefix
    """
    return secret.startswith(API_KEY_PREFIX) and len(secret) > PREFIX_LENGTH


def extract_prefix(secret: str) -> str:
    """Extract the first 12 characters as prefix for identification.

    The prefix is stored alongside the hash to enable quick lookup
    without needing to hash the full secret for every comparison.

    Args:
        secret: The full API key secret

    Returns:
        The first 12 characters of the secret
    """
    return secret[:PREFIX_LENGTH]


def hash_api_key_secret(secret: str) -> str:
    """Hash an API key secret using bcrypt.

    Args:
        secret: The plaintext API key secret to hash

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt()).decode()


def verify_api_key_secret(secret: str, key_hash: str) -> bool:
    """Verify a secret against its hash using constant-time comparison.

    Args:
        secret: The plaintext API key secret to verify
        key_hash: The bcrypt hash to verify against

    Returns:
        True if the secret matches the hash, False otherwise
    """
    try:
        return bcrypt.checkpw(secret.encode(), key_hash.encode())
    except ValueError:
        # Malformed hash or a secret longer than bcrypt accepts
        return False
