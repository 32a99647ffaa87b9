# link-shortener/shortener.py
import hashlib

DEFAULT_TOKEN_LENGTH = 8
MAX_TOKEN_LENGTH = 32  # hex digits in an MD5 digest


def generate_short_url(original_url: str, length: int = DEFAULT_TOKEN_LENGTH) -> str:
    """
    Derives the short token for a URL: the first `length` hex characters
    of the MD5 digest of its UTF-8 bytes.

    The same URL always yields the same token. Distinct URLs may share one;
    with 8 characters (32 bits) a collision becomes likely around 77k links,
    and the later submission silently replaces the earlier one.
    """
    if not 1 <= length <= MAX_TOKEN_LENGTH:
        raise ValueError(
            f"Token length must be between 1 and {MAX_TOKEN_LENGTH} (given value: {length})."
        )
    digest = hashlib.md5(original_url.encode("utf-8", "surrogatepass")).hexdigest()
    return digest[:length]
