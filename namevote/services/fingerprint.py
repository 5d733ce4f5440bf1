import hashlib

FINGERPRINT_HASH_LEN = 32
FINGERPRINT_HEADERS = (
    "User-Agent",
    "Accept-Language",
    "Sec-CH-UA",
    "Sec-CH-UA-Platform",
)


def get_fingerprint_hash(headers, secret=None):
    """Hash stable request headers into a secondary deduplication key.

    The same browser and OS produce the same hash even in a private window.
    ``secret`` keeps clients from computing the value themselves. Returns
    None when the request carries none of the headers.
    """
    header_values = [headers.get(name) or "" for name in FINGERPRINT_HEADERS]
    # The secret alone is not a fingerprint: header-less clients would all collide.
    if not "".join(header_values).strip():
        return None

    fingerprint_input = "|".join([secret or "", *header_values])
    digest = hashlib.sha256(fingerprint_input.encode("utf-8")).hexdigest()
    return digest[:FINGERPRINT_HASH_LEN]
