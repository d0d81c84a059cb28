"""Tests for CDN path resolution and media path generation."""

import pytest

from shared.paths import MediaPathGenerator, PathResolver


class TestPathResolver:
    """Tests for PathResolver.resolve."""

    @pytest.mark.parametrize(
        "base_path,relative_path",
        [
            ("/foo", "bar.jpg"),
            ("/foo", "/bar.jpg"),
            ("/foo/", "bar.jpg"),
            ("/foo/", "/bar.jpg"),
            ("/foo//", "//bar.jpg"),
        ],
    )
    def test_single_separator(self, base_path: str, relative_path: str) -> None:
        """Exactly one separator joins the parts whatever slashes they carry."""
        assert PathResolver.resolve(base_path, relative_path, True) == "/foo/bar.jpg"

    def test_strict_does_not_change_result(self) -> None:
        assert PathResolver.resolve("/foo", "/bar.jpg", True) == PathResolver.resolve("/foo", "/bar.jpg", False)

    def test_empty_relative_path_returns_base(self) -> None:
        assert PathResolver.resolve("/foo", "", True) == "/foo"
        assert PathResolver.resolve("/foo/", "", False) == "/foo/"

    def test_root_base_path(self) -> None:
        assert PathResolver.resolve("/", "bar.jpg") == "/bar.jpg"

    def test_nested_relative_path(self) -> None:
        assert PathResolver.resolve("/media", "user/0001/01/*") == "/media/user/0001/01/*"


class TestMediaPathGenerator:
    """Tests for the id-sharded storage layout."""

    @pytest.mark.parametrize(
        "media_id,expected",
        [
            (10, "user/0001/01"),
            (10000, "user/0001/11"),
            (12341230, "user/0124/42"),
            (999999999, "user/10000/100"),
        ],
    )
    def test_generate_path(self, media_id: int, expected: str) -> None:
        assert MediaPathGenerator().generate_path("user", media_id) == expected

    def test_custom_levels(self) -> None:
        generator = MediaPathGenerator(first_level=1000, second_level=10)
        assert generator.generate_path("avatar", 1234) == "avatar/0002/24"

    @pytest.mark.parametrize("media_id", [None, -1])
    def test_invalid_id(self, media_id) -> None:
        with pytest.raises(ValueError):
            MediaPathGenerator().generate_path("user", media_id)
