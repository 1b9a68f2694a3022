"""Tests for the dispatch example."""


class TestDispatchApp:
    """Verify every outcome of the dispatch example."""

    def test_default_callback(self, example_module) -> None:
        assert example_module.handle("GET", "/") == (200, "Welcome!", {})

    def test_path_parameter(self, example_module) -> None:
        assert example_module.handle("GET", "/users/7") == (200, "User 7", {})

    def test_method_not_allowed(self, example_module) -> None:
        status, _, headers = example_module.handle("DELETE", "/users/7")
        assert status == 405
        assert headers == {"Allow": "GET"}

    def test_post_route(self, example_module) -> None:
        assert example_module.handle("POST", "/users") == (200, "Created", {})

    def test_not_found(self, example_module) -> None:
        status, detail, _ = example_module.handle("GET", "/nowhere")
        assert status == 404
        assert detail == "Not Found"

    def test_dynamic_route_with_predefined_arguments(self, example_module) -> None:
        assert example_module.handle("GET", "/docs/guide/routing") == (200, "docs: guide/routing", {})
        assert example_module.handle("GET", "/docs") == (200, "docs: (index)", {})

    def test_forced_alias_redirects(self, example_module) -> None:
        status, _, headers = example_module.handle("GET", "/users/1")
        assert status == 301
        assert headers == {"Location": "http://example.com/me"}

    def test_alias_served(self, example_module) -> None:
        assert example_module.handle("GET", "/me") == (200, "User 1", {})

    def test_links(self, example_module) -> None:
        assert example_module.link("user.show", id=7) == "http://example.com/users/7"
        assert example_module.link("user.show", id=1) == "http://example.com/me"
