"""
Tests for import path normalization: relative paths, separators and
extension trimming.
"""

import pytest

from globimport.resolution import path_normalizer
from globimport.resolution.path_normalizer import (
    PathNormalizer, cross_env_path, normalize, trim_extension,
)


class TestNormalize:

    def test_strips_default_extension(self):
        assert normalize('/base', '/base/a/b.ts', ('js', 'jsx', 'ts', 'tsx')) == './a/b'

    def test_default_trim_list(self):
        assert normalize('/base', '/base/a/b.tsx') == './a/b'
        assert normalize('/base', '/base/a/b.jsx') == './a/b'

    def test_match_relative_to_base(self):
        assert normalize('/base', './plugins/a.js') == './plugins/a'

    def test_parent_directory_is_kept_dot_relative(self):
        assert normalize('/base/src', '../lib/x.js') == '../lib/x'

    def test_unconfigured_extension_is_kept(self):
        assert normalize('/base', '/base/styles/site.css') == './styles/site.css'

    def test_extension_match_is_case_sensitive(self):
        assert normalize('/base', '/base/LOUD.JS') == './LOUD.JS'

    def test_only_one_extension_is_stripped(self):
        assert normalize('/base', '/base/a.ts.js', ('js', 'ts')) == './a.ts'

    def test_first_configured_extension_wins(self):
        assert normalize('/base', '/base/x.d.ts', ('d.ts', 'ts')) == './x'
        assert normalize('/base', '/base/x.d.ts', ('ts', 'd.ts')) == './x.d'

    def test_empty_trim_list(self):
        assert normalize('/base', '/base/a.js', ()) == './a.js'


class TestHelpers:

    def test_trim_extension_requires_dot(self):
        assert trim_extension('./notjs', ('js',)) == './notjs'

    def test_cross_env_path_replaces_native_separator(self, monkeypatch):
        monkeypatch.setattr(path_normalizer.os, "sep", "\\")
        assert cross_env_path('a\\b\\c') == 'a/b/c'

    def test_normalizer_binds_extensions(self):
        normalizer = PathNormalizer(['js'])
        assert normalizer.normalize('/base', '/base/a.js') == './a'
        assert normalizer.normalize('/base', '/base/a.ts') == './a.ts'
