"""Test that the top-level convenience API works for respath."""
from __future__ import annotations


def test_quickstart_functions_are_exported() -> None:
    import respath

    assert callable(respath.resolve_alias)
    assert callable(respath.resolve_result_path)
    assert callable(respath.resolve_result_path_string)


def test_quickstart_version(expected_version: str) -> None:
    import respath

    assert respath.__version__ == expected_version


def test_quickstart_resolve_alias_with_mapping() -> None:
    import respath

    assert respath.resolve_alias("<home>", {"home": "/index"}) == "/index"


def test_quickstart_resolve_alias_without_mapping() -> None:
    import respath

    assert respath.resolve_alias("plain") == "plain"


def test_quickstart_resolve_result_path_with_prefix() -> None:
    import respath

    result = respath.resolve_result_path("/book/view", "#edit", prefix="/app")
    assert result == respath.ResultPath("/app/book.edit", None)


def test_quickstart_resolve_result_path_string() -> None:
    import respath

    text = respath.resolve_result_path_string(
        "/book/view", "/list..<ext>", aliases={"ext": "html"}
    )
    assert text == "/list.html"


def test_quickstart_config_round_trip() -> None:
    import respath

    config = respath.parse_config("prefix: /app\naliases:\n  home: /index\n")
    resolver = config.build_resolver()
    assert resolver.resolve_result_path("/a", "<home>").path == "/index"
