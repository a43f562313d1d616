"""
URL handling for description documents.

Joining is purely textual: query strings and percent-encoded characters in the
relative part are carried over untouched.
"""
from requests.compat import urlparse

from .errors import MalformedURL


def is_absolute_url(url):
    """
    True if `url` has both a scheme and a network location. `file` URLs
    may have an empty host.
    """
    try:
        parsed = urlparse(url)
        # Accessing .port validates it.
        parsed.port
    except ValueError:
        return False
    if parsed.scheme == "file":
        return url.lower().startswith("file://")
    return bool(parsed.scheme and parsed.netloc)


def url_root(url):
    """
    Return the `scheme://host[:port]` portion of an absolute URL.
    """
    if not is_absolute_url(url):
        raise MalformedURL("Not an absolute URL: %r" % url)
    parsed = urlparse(url)
    host = parsed.netloc.rpartition("@")[2]
    return "%s://%s" % (parsed.scheme, host)


def resolve_url(url, base_url):
    """
    Make `url` absolute against `base_url`.

    Blank or missing URLs give `None`. Absolute URLs are returned unchanged.
    Relative ones are appended to the base, and root-relative ones (starting
    with `/`) to the scheme, host and port of the base. Raises `MalformedURL`
    when a relative URL has no usable base.
    """
    if url is None or not url.strip():
        return None
    if is_absolute_url(url):
        return url
    if base_url is None:
        raise MalformedURL("Relative URL %r given without a base URL" % url)
    if not is_absolute_url(base_url):
        raise MalformedURL("Base URL %r is not absolute" % base_url)

    url = url.replace("\\", "/")
    if url.startswith("/"):
        resolved = url_root(base_url) + url
    else:
        if not base_url.endswith("/"):
            base_url += "/"
        resolved = base_url + url
    if not is_absolute_url(resolved):
        raise MalformedURL("Unable to build a URL from %r and %r" % (url, base_url))
    return resolved


def derive_url_base(location):
    """
    Build a base URL from the location a description was fetched from: the
    scheme, host, port and directory of the path, without the file name.
    """
    root = url_root(location)
    path = urlparse(location).path
    last_slash = path.rfind("/")
    if last_slash != -1:
        root += path[:last_slash]
    return root
