"""
Request-path matching used to decide which menu items are active.

Supported forms for an explicit activation pattern:
  - Comma-separated list of paths: "/users/,/assets/"
  - Wildcards: "/users/*" matches "/users" and anything below it
  - Regex: "r/REGEX" (e.g. r/^/assets/\\d+/$)

Matching behaviour for plain paths:
  - If a path ends with a slash ("/foo/") it matches any path that starts with that prefix.
  - Otherwise it matches either exact equality or a prefix followed by "/"
    (to avoid false positives like "/foo-old/").
"""

import re
from urllib.parse import urlparse


def normalize_path(path) -> str:
    """Return the path component of *path* with surrounding slashes trimmed."""
    return urlparse(str(path or "")).path.strip("/")


def strip_rest_base(path, bases) -> str:
    """Remove a leading ``rest_base`` segment from a normalized *path*."""
    for base in bases:
        if path == base:
            return ""
        if path.startswith(base + "/"):
            return path[len(base) + 1:]
    return path


def href_matches(href, current, *, restful=False, rest_bases=(), host=None) -> bool:
    """
    Return True when a link to *href* should be active on *current*.

    Plain matching compares the two paths for equality. RESTful matching
    also accepts any path below the link's path, after the request path is
    stripped of a leading ``rest_base``.

    A link carrying a host only matches when that host is *host*, the host
    of the current request.
    """
    if href is None or current is None:
        return False

    netloc = urlparse(str(href)).netloc
    if netloc and netloc.lower() != str(host or "").lower():
        return False

    target = normalize_path(href)
    path = normalize_path(current)

    if not restful:
        return target == path

    path = strip_rest_base(path, rest_bases)
    target = strip_rest_base(target, rest_bases)
    return path == target or (bool(target) and path.startswith(target + "/"))


def pattern_matches(pattern, current) -> bool:
    """Match *current* against an explicit activation *pattern*."""
    if not pattern or current is None:
        return False

    path = current or ""

    # Regex mode: pattern starts with "r/"
    if pattern.startswith("r/"):
        try:
            return re.search(pattern[2:], path) is not None
        except re.error:
            # If the regex is invalid, treat as no match
            return False

    for part in (p.strip() for p in pattern.split(",")):
        if not part:
            continue

        if "*" in part:
            regex = re.escape(part.strip("/")).replace(r"/\*", "(/.*)?").replace(r"\*", ".*")
            if re.fullmatch(regex, path.strip("/")):
                return True
        elif part.endswith("/"):
            if path.startswith(part):
                return True
        elif path == part or path.startswith(part + "/"):
            return True

    return False
