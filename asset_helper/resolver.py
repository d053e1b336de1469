import logging
from functools import partial

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from asset_helper.attrs import (
    attrs_from_pairs,
    defaults_for,
    merge_attrs,
    render_attrs,
)
from asset_helper.integrity import (
    SRI_ALGORITHMS,
    integrity_hash,
)
from asset_helper.loader import read_file
from asset_helper.mapping import (
    AssetHelperError,
    create_mapping,
)

log = logging.getLogger('asset_helper')


class AssetReadError(AssetHelperError):
    pass


class Resolver:
    # language=rst
    """
    Resolves logical asset names to the files an external asset pipeline produced, and renders
    `<script>` and `<link>` tags for them.

    The manifest is a JSON object mapping original names to built names, for example as written
    by gulp-rev:

    .. code-block:: json

        {
          "js/main.min.js": "js/main.min-da89a0c4.js",
          "css/style.min.css": "css/style.min-16680603.css"
        }

    .. code-block:: python

        resolver = Resolver('/static/', 'manifest.json', use_minified=True)
        resolver.script_tag('js/main.js')
        # <script src="/static/js/main.min-da89a0c4.js" type="text/javascript"></script>

    `manifest_loader` is called with a path and returns the bytes at that path. It reads the
    manifest and, when `use_sri` is on, the assets themselves. Pass `manifest_loader=None` to
    skip the manifest entirely, or `mapping_builder` to supply your own mapping: any callable
    returning an object with a `get(name)` method. Without a `manifest_path` the mapping is empty.
    Assets are read from the filesystem when there is no loader.

    The manifest is read once here. If that fails no resolver is created.
    """

    def __init__(
        self,
        url_prefix,
        manifest_path=None,
        *,
        manifest_loader=read_file,
        mapping_builder=None,
        use_minified=False,
        use_sri=False,
        sri_algorithm='sha256',
    ):
        if sri_algorithm not in SRI_ALGORITHMS:
            raise ValueError(f'sri_algorithm must be one of {", ".join(SRI_ALGORITHMS)}, got {sri_algorithm!r}')

        self.url_prefix = url_prefix.rstrip('/') + '/'
        self.manifest_path = manifest_path
        self.manifest_loader = manifest_loader
        self.use_minified = use_minified
        self.use_sri = use_sri
        self.sri_algorithm = sri_algorithm

        if mapping_builder is None:
            # Without a manifest every name resolves to itself
            load = manifest_loader if manifest_path is not None else None
            mapping_builder = partial(create_mapping, load, manifest_path, use_minified)
        self.mapping_builder = mapping_builder
        self.mapping = mapping_builder()

    def __repr__(self):
        return f'<{type(self).__name__} url_prefix={self.url_prefix!r} manifest_path={self.manifest_path!r}>'

    def script_tag(self, name, *attrs):
        """
        `<script>` tag for the asset `name`. Extra attributes are given as name/value pairs:

        .. code-block:: python

            resolver.script_tag('js/main.js', 'charset', 'UTF-8')
        """
        return format_html('<script {}></script>', self._tag_attrs('script', 'src', name, attrs))

    def link_tag(self, name, *attrs):
        """
        Stylesheet `<link>` tag for the asset `name`. See `script_tag`.
        """
        return format_html('<link {}/>', self._tag_attrs('link', 'href', name, attrs))

    def static(self):
        """
        The URL prefix, for assets that aren't scripts or stylesheets: `{{ static }}img/logo.png`
        """
        return mark_safe(self.url_prefix)

    def func_map(self):
        return {
            'scripttag': self.script_tag,
            'linktag': self.link_tag,
            'static': self.static,
        }

    def attach(self, environment):
        """
        Make `scripttag`, `linktag` and `static` available as globals in a Jinja2 environment.
        """
        environment.globals.update(self.func_map())
        return environment

    def integrity(self, resolved):
        try:
            content = (self.manifest_loader or read_file)(resolved)
        except Exception as e:
            raise AssetReadError(f'Could not read {resolved!r} to compute its integrity: {e}') from e
        log.debug('Computing %s integrity for %s (%d bytes)', self.sri_algorithm, resolved, len(content))
        return integrity_hash(content, self.sri_algorithm)

    def _tag_attrs(self, tag, url_attr, name, attrs):
        result = merge_attrs(defaults_for(tag), attrs_from_pairs(attrs))
        resolved = self.mapping.get(name)
        result[url_attr] = self.url_prefix + resolved
        if self.use_sri:
            result['integrity'] = self.integrity(resolved)
            result['crossorigin'] = 'anonymous'
        return render_attrs(result)
