def normalize_optional_url(raw: str | None) -> str:
    """
    Optional URL normalizer:
    - None/"" -> ""
    - "www.site.com" -> "https://www.site.com"
    - "http://..." / "https://..." kept
    - trims spaces
    """
    v = (raw or "").strip()
    if not v:
        return ""

    # Already has scheme
    if v.lower().startswith(("http://", "https://")):
        return v

    # Add default scheme
    return "https://" + v


def wants_json(request) -> bool:
    return (
        request.headers.get("X-Requested-With") == "XMLHttpRequest"
        or "application/json" in request.headers.get("Accept", "")
    )


def posted_values(post, fields) -> dict:
    """What the user typed, to refill a form without running its validation."""
    return {f: post.get(f, "") for f in fields}
