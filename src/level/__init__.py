"""Level — routes, filters and post listings for team spaces.

The posts list of a space is described by a ``Params`` value that
converts to and from its URL::

    from level import init, parse, to_string

    params = init("acme")
    to_string(params)                   # "/acme/inbox"
    parse("/acme/feed?state=open")      # Params(space_slug="acme", ...)

Serving listings over ASGI::

    from level import App

    app = App(load_posts)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "InboxStateFilter",
    "LastActivityFilter",
    "LevelError",
    "MethodNotAllowed",
    "NotFound",
    "Params",
    "Post",
    "PostStateFilter",
    "PostsView",
    "filter_posts",
    "init",
    "parse",
    "to_string",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import level`` fast while providing a clean top-level API.
    """
    if name == "App":
        from level.app import App

        return App

    if name == "AppConfig":
        from level.config import AppConfig

        return AppConfig

    if name in ("ConfigurationError", "HTTPError", "LevelError", "MethodNotAllowed", "NotFound"):
        from level import errors

        return getattr(errors, name)

    if name in ("InboxStateFilter", "LastActivityFilter", "PostStateFilter"):
        from level import filters

        return getattr(filters, name)

    if name in ("Params", "PostsView", "init", "parse", "to_string"):
        from level.routes import posts

        return getattr(posts, name)

    if name in ("Post", "filter_posts"):
        from level import posts as post_listing

        return getattr(post_listing, name)

    msg = f"module 'level' has no attribute {name!r}"
    raise AttributeError(msg)
