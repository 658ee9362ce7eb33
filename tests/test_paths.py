"""Tests for perch.routing.paths — path templates and overrides."""

from perch.routing.paths import DEFAULT_ROUTE_PATHS, merge_route_paths, resolve_path


class TestDefaults:
    def test_keys(self) -> None:
        assert set(DEFAULT_ROUTE_PATHS) == {
            "sessions",
            "registrations",
            "registrations_new",
            "registrations_edit",
            "passwords",
            "confirmations",
            "unlocks",
            "invitations",
            "invitations_create",
            "invitations_resend",
        }

    def test_resend_has_id_param(self) -> None:
        assert DEFAULT_ROUTE_PATHS["invitations_resend"] == "/invitations/{id}/resend"


class TestMerge:
    def test_override_wins_for_its_key_only(self) -> None:
        paths = merge_route_paths(DEFAULT_ROUTE_PATHS, {"sessions": "/my-sessions"})
        assert paths["sessions"] == "/my-sessions"
        for key, value in DEFAULT_ROUTE_PATHS.items():
            if key != "sessions":
                assert paths[key] == value

    def test_none_keeps_defaults(self) -> None:
        assert merge_route_paths(DEFAULT_ROUTE_PATHS, None) == dict(DEFAULT_ROUTE_PATHS)

    def test_inputs_not_modified(self) -> None:
        overrides = {"sessions": "/login"}
        defaults = {"sessions": "/sessions"}
        merged = merge_route_paths(defaults, overrides)
        merged["sessions"] = "/other"
        assert defaults == {"sessions": "/sessions"}
        assert overrides == {"sessions": "/login"}


class TestResolve:
    def test_bare(self) -> None:
        assert resolve_path({"sessions": "/sessions"}, "sessions") == "/sessions"

    def test_suffix(self) -> None:
        assert resolve_path({"passwords": "/passwords"}, "passwords", "/{id}/edit") == (
            "/passwords/{id}/edit"
        )

    def test_trailing_slash_dropped_before_suffix(self) -> None:
        assert resolve_path({"unlocks": "/unlocks/"}, "unlocks", "/new") == "/unlocks/new"

    def test_trailing_slash_dropped_without_suffix(self) -> None:
        paths = {"sessions": "/login/"}
        assert resolve_path(paths, "sessions") == "/login"
        assert resolve_path(paths, "sessions", "/new") == "/login/new"

    def test_root_stays_root(self) -> None:
        assert resolve_path({"sessions": "/"}, "sessions") == "/"
        assert resolve_path({"sessions": "/"}, "sessions", "/new") == "/new"
