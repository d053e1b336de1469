__version__ = '1.0.0'

from asset_helper.attrs import InvalidAttributesError
from asset_helper.integrity import integrity_hash
from asset_helper.loader import (
    file_loader,
    read_file,
)
from asset_helper.mapping import (
    AssetHelperError,
    ManifestLoadError,
    ManifestParseError,
    StaticMap,
    create_mapping,
    minified_name,
)
from asset_helper.resolver import (
    AssetReadError,
    Resolver,
)

__all__ = [
    'AssetHelperError',
    'AssetReadError',
    'InvalidAttributesError',
    'ManifestLoadError',
    'ManifestParseError',
    'Resolver',
    'StaticMap',
    'create_mapping',
    'file_loader',
    'integrity_hash',
    'minified_name',
    'read_file',
]
