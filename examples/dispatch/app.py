"""Dispatch — a host turning routing results into responses.

Demonstrates route registration, path parameters, dynamic routes,
method restrictions, forced aliases, reverse routing and translating
empty or method-only results into 404 and 405 responses.

Run:
    python app.py
"""

import logging

from wayfinder import HTTPError, RouteContainer, Router, RouterConfig

BASE_URL = "http://example.com"


def home() -> str:
    return "Welcome!"


def show_user(id: str) -> str:  # noqa: A002
    return f"User {id}"


def create_user() -> str:
    return "Created"


def browse(*segments: str, section: str) -> str:
    return f"{section}: {'/'.join(segments) or '(index)'}"


container = RouteContainer(source="app.py")
container.set_route(container.create_route("/users/%id%", show_user, "user.show", "GET"))
container.set_route(container.create_route("/users", create_user, "user.create", "POST"))

docs = container.create_route("/docs", browse, "docs")
docs.is_dynamic = True
docs.predefined_arguments = {"section": "docs"}
container.set_route(docs)

container.set_alias(container.create_alias("/users/1", "/me", is_forced=True))

router = Router(container, RouterConfig(default_callback=home))


def handle(method: str, path: str) -> tuple[int, str, dict[str, str]]:
    """Route a request and return ``(status, body, headers)``."""
    result = router.route(method, path, BASE_URL)

    if result.alias is not None:
        location = BASE_URL + result.alias.alias
        return 301, "", {"Location": location}

    try:
        result.raise_for_status()
    except HTTPError as err:
        return err.status, err.detail, dict(err.headers)

    route = result.route
    positional = [v for k, v in route.arguments.items() if isinstance(k, int)]
    named = {k: v for k, v in route.arguments.items() if isinstance(k, str)}
    body = route.callback(*positional, **named, **route.predefined_arguments)
    return 200, body, {}


def link(route_id: str, **arguments: object) -> str:
    """Build an absolute link, preferring a forced alias."""
    return container.get_url_alias(container.get_url(BASE_URL, route_id, arguments))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    for request in [("GET", "/"), ("GET", "/users/7"), ("DELETE", "/users/7"), ("GET", "/docs/a/b")]:
        print(request, handle(*request))
    print(link("user.show", id=1))
