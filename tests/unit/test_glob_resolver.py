"""
Tests for GlobResolver and glob-source detection.
"""

import pytest

from globimport.resolution.glob_resolver import (
    ChildModule, GlobResolver, is_glob_source, strip_glob_prefix,
)
from globimport.resolution.matcher import FileMatch
from globimport.shared.errors import MissingGlobPatternError, NonRelativePatternError
from globimport.utils.config import GlobImportOptions


class TestGlobSourceDetection:

    def test_plain_relative_path_is_not_glob(self):
        assert not is_glob_source("./utils")

    def test_star_pattern_is_glob(self):
        assert is_glob_source("./plugins/*.js")
        assert is_glob_source("glob:./plugins/*.js")

    def test_tag_without_pattern_is_an_error(self):
        with pytest.raises(MissingGlobPatternError, match="Missing glob pattern 'glob:./utils'"):
            is_glob_source("glob:./utils")

    def test_magic_without_star_is_not_glob(self):
        assert not is_glob_source("./a?.js")
        assert not is_glob_source("glob:./{a,b}.js")

    def test_strip_prefix(self):
        assert strip_glob_prefix("glob:./x/*") == "./x/*"
        assert strip_glob_prefix("./x/*") == "./x/*"


class TestGlobResolver:

    def test_resolves_matches_in_order(self, plugin_tree):
        modules = GlobResolver().resolve("./plugins/*.js", str(plugin_tree))
        assert modules == [
            ChildModule("./plugins/a.js", "./plugins/a", "a"),
            ChildModule("./plugins/b.js", "./plugins/b", "b"),
        ]

    def test_tag_is_stripped(self, plugin_tree):
        tagged = GlobResolver().resolve("glob:./plugins/*.js", str(plugin_tree))
        plain = GlobResolver().resolve("./plugins/*.js", str(plugin_tree))
        assert tagged == plain

    def test_nested_matches_get_dollar_names(self, plugin_tree):
        modules = GlobResolver().resolve("./plugins/**/*.js", str(plugin_tree))
        assert [(m.relative_import_path, m.derived_name) for m in modules] == [
            ("./plugins/a", "a"),
            ("./plugins/b", "b"),
            ("./plugins/sub/d", "sub$d"),
            ("./plugins/sub/deep/e", "sub$deep$e"),
        ]

    @pytest.mark.parametrize("pattern", ["plugins/*.js", "glob:plugins/*.js", "/abs/*.js"])
    def test_non_relative_pattern(self, pattern, plugin_tree):
        with pytest.raises(NonRelativePatternError, match="must be relative"):
            GlobResolver().resolve(pattern, str(plugin_tree))

    def test_configured_trim_extensions(self, plugin_tree):
        resolver = GlobResolver(GlobImportOptions(trim_file_extensions=("ts",)))
        modules = resolver.resolve("./plugins/*.{js,ts}", str(plugin_tree))
        assert [m.relative_import_path for m in modules] == [
            "./plugins/a.js", "./plugins/b.js", "./plugins/c",
        ]

    def test_unresolvable_name_is_none(self, make_tree):
        root = make_tree(["parts/---.js"])
        modules = GlobResolver().resolve("./parts/*.js", str(root))
        assert modules == [ChildModule("./parts/---.js", "./parts/---", None)]

    def test_matcher_order_is_not_resorted(self):
        def fake_matcher(pattern, cwd):
            return [FileMatch("./z.js", "z"), FileMatch("./a.js", "a")]

        modules = GlobResolver(matcher=fake_matcher).resolve("./*.js", "/base")
        assert [m.derived_name for m in modules] == ["z", "a"]

    def test_trailing_globstar_names_include_file_name(self, plugin_tree):
        modules = GlobResolver().resolve("./plugins/sub/**", str(plugin_tree))
        assert modules == [
            ChildModule("./plugins/sub/d.js", "./plugins/sub/d", "dJs"),
            ChildModule("./plugins/sub/deep/e.js", "./plugins/sub/deep/e", "deep$eJs"),
        ]
