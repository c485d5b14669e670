"""Absolute URL generation for hypermedia links."""

from typing import Any, Protocol
from urllib.parse import urlencode

from fastapi import Request
from starlette.datastructures import URLPath


class RouteResolver(Protocol):
    """Anything that can reverse a named route (FastAPI app or router)."""

    def url_path_for(self, name: str, /, **path_params: Any) -> URLPath: ...


class UrlBuilder:
    """Builds absolute URLs from route names or plain paths.

    Example usage:
        urls = UrlBuilder("http://api.example.com/", app)
        urls.absolute_url("items:view", product_id=42)
        # -> "http://api.example.com/items/42"
    """

    def __init__(self, base_url: str, routes: RouteResolver) -> None:
        """Initialize builder.

        Args:
            base_url: Scheme and host (plus root path) of the API.
            routes: Route resolver, usually the FastAPI application.
        """
        self.base_url = base_url.rstrip("/")
        self.routes = routes

    def absolute_url(self, route_name: str, **params: Any) -> str:
        """Build an absolute URL for a named route.

        Args:
            route_name: Route name as registered on the router.
            params: Path parameters.

        Returns:
            Absolute URL.
        """
        path = self.routes.url_path_for(route_name, **{k: str(v) for k, v in params.items()})
        return f"{self.base_url}{path}"

    def to(self, path: str, **query: Any) -> str:
        """Build an absolute URL for a path outside this router.

        Args:
            path: Absolute path, e.g. "/cart/add".
            query: Query string parameters.

        Returns:
            Absolute URL.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url


def get_url_builder(request: Request) -> UrlBuilder:
    """Get URL builder for the current request."""
    return UrlBuilder(str(request.base_url), request.app)
