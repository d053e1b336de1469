import os

import pytest
from django.apps import apps
from django.test import override_settings

from asset_helper.conf import (
    get_resolver,
    resolver_from_settings,
)
from asset_helper.mapping import (
    ManifestLoadError,
    ManifestParseError,
)

STATIC_DIR = os.path.join(os.path.dirname(__file__), 'static')


def test_get_resolver_is_cached():
    assert get_resolver() is get_resolver()


def test_get_resolver_is_rebuilt_when_settings_change():
    before = get_resolver()
    with override_settings(ASSET_HELPER_USE_MINIFIED=True):
        assert get_resolver() is not before
        assert get_resolver().use_minified is True
    assert get_resolver().use_minified is False


def test_resolver_from_settings():
    resolver = resolver_from_settings()
    assert resolver.url_prefix == '/static/'
    assert resolver.manifest_path == 'manifest.json'
    assert resolver.use_minified is False
    assert resolver.use_sri is False
    assert resolver.sri_algorithm == 'sha256'
    assert resolver.mapping.get('js/fox.js') == 'js/fox-0c4a1b2e.js'


@override_settings(ASSET_HELPER_MANIFEST=None)
def test_without_manifest():
    resolver = resolver_from_settings()
    assert len(resolver.mapping) == 0
    assert resolver.mapping.get('js/fox.js') == 'js/fox.js'


@override_settings(ASSET_HELPER_MANIFEST=None, ASSET_HELPER_USE_SRI=True)
def test_without_manifest_sri_reads_from_root():
    assert 'integrity="sha256-' in resolver_from_settings().link_tag('css/style-16680603.css')


@override_settings(ASSET_HELPER_ROOT=None, STATIC_ROOT=STATIC_DIR)
def test_root_defaults_to_static_root():
    assert resolver_from_settings().mapping.get('css/style.css') == 'css/style-16680603.css'


@override_settings(ASSET_HELPER_MANIFEST=os.path.join(STATIC_DIR, 'manifest.json'), ASSET_HELPER_ROOT='/nonexistent')
def test_absolute_manifest_path():
    assert resolver_from_settings().mapping.get('css/style.css') == 'css/style-16680603.css'


@override_settings(ASSET_HELPER_URL_PREFIX=None, STATIC_URL='/assets/')
def test_url_prefix_defaults_to_static_url():
    assert resolver_from_settings().url_prefix == '/assets/'


@override_settings(ASSET_HELPER_MANIFEST='missing.json')
def test_missing_manifest():
    with pytest.raises(ManifestLoadError):
        resolver_from_settings()


@override_settings(ASSET_HELPER_MANIFEST='js/fox-0c4a1b2e.js')
def test_broken_manifest_fails_startup():
    with pytest.raises(ManifestParseError):
        apps.get_app_config('asset_helper').ready()
