"""Unit tests for Nri resolution."""

import pytest
from pydantic import ValidationError

from nri import (
    InvalidQueryValueError,
    MissingProjectContextError,
    Nri,
    NriResolver,
    NriSettings,
    PackageResourceMalformedError,
    Scheme,
    StaticProjectContext,
    ThumbnailSpec,
    UnknownSchemeError,
    parse_nri,
)


@pytest.fixture
def resolver(fake_fs):
    """Resolver with no project context and an empty filesystem."""
    return NriResolver(filesystem=fake_fs(), settings=NriSettings())


class TestAppResources:
    """Test nars:: resolution."""

    def test_scale_free(self, resolver):
        """Test no scale means a scale-free asset lookup."""
        resolved = resolver.resolve(parse_nri("nars::assets/a.png"))
        assert resolved.kind == "asset"
        assert resolved.location == "assets/a.png"
        assert resolved.scale is None
        assert resolved.package is None
        assert resolved.source == "nars::assets/a.png"

    def test_caller_scale(self, resolver):
        """Test caller scale selects an exact-scale asset."""
        resolved = resolver.resolve(parse_nri("nars::assets/a.png"), scale=2.0)
        assert resolved.scale == 2.0

    def test_query_scale_wins(self, resolver):
        """Test identifier scale overrides caller scale."""
        resolved = resolver.resolve(parse_nri("nars::a.png?scale=3"), scale=2.0)
        assert resolved.scale == 3.0
        assert resolved.location == "a.png"

    def test_invalid_scale_query(self, resolver):
        """Test non-numeric scale query raises."""
        with pytest.raises(InvalidQueryValueError, match="must be a number"):
            resolver.resolve(parse_nri("nars::a.png?scale=big"))

    def test_flag_scale_query(self, resolver):
        """Test scale flag without a value raises."""
        with pytest.raises(InvalidQueryValueError):
            resolver.resolve(parse_nri("nars::a.png?scale"))


class TestPackageResources:
    """Test npkrs:: resolution."""

    def test_package_asset(self, resolver):
        """Test package and path are split."""
        resolved = resolver.resolve(parse_nri("npkrs::mypkg/assets/icon.png"))
        assert resolved.kind == "asset"
        assert resolved.package == "mypkg"
        assert resolved.location == "assets/icon.png"
        assert resolved.scale is None

    def test_package_scale(self, resolver):
        """Test scale is honored like app assets."""
        resolved = resolver.resolve(parse_nri("npkrs::p/a.png?scale=2"))
        assert resolved.scale == 2.0

    def test_empty_package(self, resolver):
        """Test empty package segment resolves with an empty package name."""
        resolved = resolver.resolve(parse_nri("npkrs::/icon.png"))
        assert resolved.package == ""
        assert resolved.location == "icon.png"

    def test_missing_asset_path(self, resolver):
        """Test package without an asset path resolves to an empty location."""
        resolved = resolver.resolve(parse_nri("npkrs::mypkg"))
        assert resolved.kind == "asset"
        assert resolved.package == "mypkg"
        assert resolved.location == ""

    def test_no_segments(self, resolver):
        """Test directly built identifier without segments is malformed."""
        with pytest.raises(PackageResourceMalformedError, match="no package segment"):
            resolver.resolve(Nri(Scheme.PACKAGE, ()))


class TestUserResources:
    """Test nurs:: resolution."""

    def test_plain_file(self, resolver):
        """Test plain file with default scale."""
        resolved = resolver.resolve(parse_nri("nurs::/photos/cat.jpg"))
        assert resolved.kind == "file"
        assert resolved.location == "/photos/cat.jpg"
        assert resolved.scale == 1.0
        assert resolved.thumbnail is None

    def test_query_scale(self, resolver):
        """Test scale query on a user file."""
        resolved = resolver.resolve(parse_nri("nurs::img.png?scale=2.0"))
        assert resolved.scale == 2.0

    def test_thumbnail_exists(self, fake_fs):
        """Test existing thumbnail is preferred."""
        fs = fake_fs("/photos/.thumbnails/small/cat.jpg")
        resolver = NriResolver(filesystem=fs, settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nurs::/photos/cat.jpg"), thumbnail=ThumbnailSpec("small")
        )
        assert resolved.location == "/photos/.thumbnails/small/cat.jpg"
        assert resolved.thumbnail == "small"
        assert resolved.scale == 1.0

    def test_thumbnail_missing_falls_back(self, fake_fs):
        """Test missing thumbnail falls back to the original file."""
        fs = fake_fs()
        resolver = NriResolver(filesystem=fs, settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nurs::/photos/cat.jpg"), thumbnail=ThumbnailSpec("small")
        )
        assert resolved.location == "/photos/cat.jpg"
        assert resolved.thumbnail is None
        assert fs.checked == ["/photos/.thumbnails/small/cat.jpg"]

    def test_thumbnail_query_wins(self, fake_fs):
        """Test identifier thumbnail query overrides caller thumbnail."""
        fs = fake_fs("/p/.thumbnails/large/a.png")
        resolver = NriResolver(filesystem=fs, settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nurs::/p/a.png?thumbnail=large"), thumbnail=ThumbnailSpec("small")
        )
        assert resolved.thumbnail == "large"
        assert fs.checked == ["/p/.thumbnails/large/a.png"]

    def test_blank_thumbnail_query_uses_caller(self, fake_fs):
        """Test flag-only thumbnail query falls back to the caller hint."""
        fs = fake_fs("/p/.thumbnails/small/a.png")
        resolver = NriResolver(filesystem=fs, settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nurs::/p/a.png?thumbnail"), thumbnail=ThumbnailSpec("small")
        )
        assert resolved.thumbnail == "small"

    def test_no_thumbnail_no_check(self, fake_fs):
        """Test filesystem is untouched without a thumbnail."""
        fs = fake_fs()
        NriResolver(filesystem=fs, settings=NriSettings()).resolve(
            parse_nri("nurs::/p/a.png")
        )
        assert fs.checked == []

    def test_default_scale_setting(self, fake_fs):
        """Test default scale comes from settings."""
        resolver = NriResolver(filesystem=fake_fs(), settings=NriSettings(default_scale=2.0))
        assert resolver.resolve(parse_nri("nurs::a.png")).scale == 2.0


class TestNetworkResources:
    """Test uri:: resolution."""

    def test_url(self, resolver):
        """Test URL keeps its query tail."""
        resolved = resolver.resolve(parse_nri("uri::https://example.com/a.png?v=2"))
        assert resolved.kind == "network"
        assert resolved.location == "https://example.com/a.png?v=2"
        assert resolved.scale == 1.0

    def test_scale(self, resolver):
        """Test caller scale on network resources."""
        resolved = resolver.resolve(parse_nri("uri::example.com/a.png"), scale=1.5)
        assert resolved.scale == 1.5


class TestProjectResources:
    """Test nprs:: resolution."""

    def test_missing_context(self, resolver):
        """Test no project path and no context raises."""
        with pytest.raises(MissingProjectContextError, match="No project path"):
            resolver.resolve(parse_nri("nprs::img.png"))

    def test_context_without_project(self, fake_fs):
        """Test context reporting no project raises."""
        resolver = NriResolver(
            project_context=StaticProjectContext(None),
            filesystem=fake_fs(),
            settings=NriSettings(),
        )
        with pytest.raises(MissingProjectContextError):
            resolver.resolve(parse_nri("nprs::img.png"))

    def test_project_path(self, resolver):
        """Test caller project path roots the file."""
        resolved = resolver.resolve(parse_nri("nprs::img.png"), project_path="/proj")
        assert resolved.kind == "file"
        assert resolved.location == "/proj/img.png"
        assert resolved.scale == 1.0

    def test_empty_project_path_not_replaced(self, fake_fs):
        """Test an empty caller project path is used instead of the context."""
        resolver = NriResolver(
            project_context=StaticProjectContext("/ctx"),
            filesystem=fake_fs(),
            settings=NriSettings(),
        )
        resolved = resolver.resolve(parse_nri("nprs::img.png"), project_path="")
        assert resolved.location == "/img.png"

    def test_empty_context_root(self, fake_fs):
        """Test an empty context root is used as-is, like an empty project path."""
        resolver = NriResolver(
            project_context=StaticProjectContext(""),
            filesystem=fake_fs(),
            settings=NriSettings(),
        )
        resolved = resolver.resolve(parse_nri("nprs::img.png"))
        assert resolved.location == "/img.png"

    def test_context_root(self, fake_fs):
        """Test project context is used when no path is given."""
        resolver = NriResolver(
            project_context=StaticProjectContext("/work/album"),
            filesystem=fake_fs(),
            settings=NriSettings(),
        )
        resolved = resolver.resolve(parse_nri("nprs::images/cover.png"))
        assert resolved.location == "/work/album/images/cover.png"

    def test_project_path_overrides_context(self, fake_fs):
        """Test caller project path wins over the context."""
        resolver = NriResolver(
            project_context=StaticProjectContext("/ctx"),
            filesystem=fake_fs(),
            settings=NriSettings(),
        )
        resolved = resolver.resolve(parse_nri("nprs::a.png"), project_path="/arg")
        assert resolved.location == "/arg/a.png"

    def test_thumbnail_exists(self, fake_fs):
        """Test existing project thumbnail is preferred."""
        fs = fake_fs("/proj/img/.thumbnails/small/a.png")
        resolver = NriResolver(filesystem=fs, settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nprs::img/a.png?thumbnail=small&scale=2"), project_path="/proj"
        )
        assert resolved.location == "/proj/img/.thumbnails/small/a.png"
        assert resolved.thumbnail == "small"
        assert resolved.scale == 2.0

    def test_thumbnail_missing(self, fake_fs):
        """Test missing project thumbnail falls back to the full path."""
        resolver = NriResolver(filesystem=fake_fs(), settings=NriSettings())
        resolved = resolver.resolve(
            parse_nri("nprs::img/a.png"),
            project_path="/proj",
            thumbnail=ThumbnailSpec("small"),
        )
        assert resolved.location == "/proj/img/a.png"
        assert resolved.thumbnail is None


class TestDeterminism:
    """Test repeat resolution and string entry point."""

    def test_same_input_same_result(self, resolver):
        """Test resolution is repeatable."""
        nri = parse_nri("nprs::a.png?scale=2")
        first = resolver.resolve(nri, project_path="/p")
        second = resolver.resolve(nri, project_path="/p")
        assert first == second

    def test_resolve_string(self, resolver):
        """Test parse-and-resolve helper."""
        resolved = resolver.resolve_string("nars::a.png", scale=2.0)
        assert resolved.location == "a.png"
        assert resolved.scale == 2.0

    def test_resolve_string_parse_error(self, resolver):
        """Test parse errors propagate from resolve_string."""
        with pytest.raises(UnknownSchemeError):
            resolver.resolve_string("bogus::a")

    def test_resolved_is_frozen(self, resolver):
        """Test resolved references are immutable."""
        resolved = resolver.resolve(parse_nri("nars::a.png"))
        with pytest.raises(ValidationError):
            resolved.location = "b.png"


class TestCustomKeys:
    """Test query keys configured through settings."""

    def test_custom_scale_key(self, fake_fs):
        """Test alternative scale key."""
        resolver = NriResolver(
            filesystem=fake_fs(), settings=NriSettings(scale_query_key="dpr")
        )
        assert resolver.resolve(parse_nri("nars::a.png?dpr=3")).scale == 3.0
        assert resolver.resolve(parse_nri("nars::a.png?scale=3")).scale is None

    def test_custom_thumbnail_key(self, fake_fs):
        """Test default transformer uses the configured key."""
        fs = fake_fs(".thumbnails/tiny/a.png")
        resolver = NriResolver(
            filesystem=fs, settings=NriSettings(thumbnail_query_key="thumb")
        )
        resolved = resolver.resolve(parse_nri("nurs::a.png?thumb=tiny"))
        assert resolved.location == ".thumbnails/tiny/a.png"
