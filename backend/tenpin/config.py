import os

def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "").strip() or "/api"
    if not val.startswith("/"):
        val = "/" + val
    while len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def parse_allowed_origins(raw):
    """Split a comma-separated ALLOWED_ORIGINS value, rejecting wildcards."""
    raw = (raw or "").strip()
    if not raw:
        raise ValueError(
            "ALLOWED_ORIGINS environment variable must be set to a comma-separated "
            "list of trusted origins."
        )

    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins:
        raise ValueError("ALLOWED_ORIGINS must contain at least one non-empty origin.")

    # Credentials + wildcard origins is unsafe
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))
