"""Path resolution — maps a request's host + path onto the configured roots.

Pure functions over the request target and an immutable RedirectConfig.
No I/O, no shared state; safe to call from any worker thread.
"""

from dataclasses import dataclass

from vanity.config import RedirectConfig
from vanity.errors import NotFound
from vanity.http.response import Redirect


@dataclass(frozen=True, slots=True)
class Resolution:
    """The effective roots for one request.

    ``suffix`` is the part of the request path below ``import_root``
    (``""`` or starting with ``/``). It is carried along but never
    rendered: the redirect always targets the repository root.
    """

    import_root: str
    repo_root: str
    suffix: str = ""


def normalize(host: str, path: str) -> str:
    """Join host and path, dropping a single trailing slash."""
    return (host + path).removesuffix("/")


def resolve(host: str, path: str, config: RedirectConfig) -> Resolution | Redirect:
    """Resolve a request against the configured mapping.

    Returns a ``Resolution`` to render, or a ``Redirect`` when a wildcard
    mapping is asked for its bare import root (no element to substitute).

    Raises:
        NotFound: If the path is outside the import root, or a wildcard
            mapping is given fewer path elements than it needs.

    Examples::

        cfg = RedirectConfig("rsc.io", "https://github.com/rsc", wildcard=1)
        resolve("rsc.io", "/x86/x86asm", cfg)
        # Resolution("rsc.io/x86", "https://github.com/rsc/x86", "/x86asm")
        resolve("rsc.io", "/", cfg)
        # Redirect("https://github.com/rsc")
    """
    target = normalize(host, path)
    root = config.import_root

    if config.wildcard == 0:
        if target != root and not target.startswith(root + "/"):
            raise NotFound()
        return Resolution(
            import_root=root,
            repo_root=config.repo_root,
            suffix=target[len(root):],
        )

    if target == root:
        return Redirect(config.repo_root)
    if not target.startswith(root + "/"):
        raise NotFound()

    parts = target[len(root) + 1:].split("/")
    if len(parts) < config.wildcard:
        raise NotFound()

    elem = "/".join(parts[: config.wildcard])
    suffix = "/".join(parts[config.wildcard:])
    if suffix:
        suffix = "/" + suffix

    return Resolution(
        import_root=f"{root}/{elem}",
        repo_root=f"{config.repo_root}/{elem}",
        suffix=suffix,
    )


def is_ping(host: str, path: str, config: RedirectConfig) -> bool:
    """True for the diagnostic endpoint or anything below it."""
    target = normalize(host, path)
    ping = config.ping_path
    return target == ping or target.startswith(ping + "/")
