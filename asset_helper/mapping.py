import json
import logging
from types import MappingProxyType

log = logging.getLogger('asset_helper')


class AssetHelperError(Exception):
    pass


class ManifestLoadError(AssetHelperError):
    pass


class ManifestParseError(AssetHelperError):
    pass


def minified_name(name):
    """
    Insert `.min` before the extension of the last path segment:

    .. code-block:: python

        >>> minified_name('js/main.js')
        'js/main.min.js'
        >>> minified_name('js/vendor/jquery')
        'js/vendor/jquery.min'
    """
    directory, slash, base = name.rpartition('/')
    stem, dot, ext = base.rpartition('.')
    if not dot:
        return name + '.min'
    return f'{directory}{slash}{stem}.min.{ext}'


class StaticMap:
    """
    Maps logical asset names to the names the asset pipeline produced. Names missing from the
    manifest are returned unchanged.
    """

    def __init__(self, manifest=None, *, use_minified=False):
        # Values that aren't strings can never be resolved to, so they are the same as missing keys
        self._table = MappingProxyType({k: v for k, v in (manifest or {}).items() if isinstance(v, str)})
        self.use_minified = use_minified

    def __len__(self):
        return len(self._table)

    def __contains__(self, name):
        return name in self._table

    def __repr__(self):
        return f'<{type(self).__name__} entries={len(self._table)} use_minified={self.use_minified}>'

    def get(self, name):
        if self.use_minified:
            value = self._table.get(minified_name(name))
            if value is not None:
                return value
        return self._table.get(name, name)


def parse_manifest(content):
    try:
        manifest = json.loads(content)
    except (ValueError, RecursionError) as e:
        raise ManifestParseError(f'Manifest is not valid JSON: {e}') from e

    if not isinstance(manifest, dict):
        raise ManifestParseError(f'Manifest must be a JSON object, got {type(manifest).__name__}')

    return manifest


def create_mapping(load, path, use_minified=False):
    """
    Build a `StaticMap` from the manifest at `path`, read with `load`. Without a loader the
    mapping is empty and every name resolves to itself.
    """
    if load is None:
        return StaticMap(use_minified=use_minified)

    try:
        content = load(path)
    except Exception as e:
        raise ManifestLoadError(f'Could not load manifest {path!r}: {e}') from e

    manifest = parse_manifest(content)
    log.debug('Loaded asset manifest %s with %d entries', path, len(manifest))
    return StaticMap(manifest, use_minified=use_minified)
