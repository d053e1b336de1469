from functools import lru_cache

from django.conf import settings
from django.dispatch import receiver
from django.test.signals import setting_changed

from asset_helper.loader import file_loader
from asset_helper.resolver import Resolver


def resolver_from_settings():
    """
    Build a `Resolver` from the `ASSET_HELPER_*` settings. Relative manifest and asset paths are
    read from `ASSET_HELPER_ROOT`, which defaults to `STATIC_ROOT`.
    """
    url_prefix = getattr(settings, 'ASSET_HELPER_URL_PREFIX', None) or getattr(settings, 'STATIC_URL', None) or '/static/'
    root = getattr(settings, 'ASSET_HELPER_ROOT', None) or getattr(settings, 'STATIC_ROOT', None)

    return Resolver(
        url_prefix,
        getattr(settings, 'ASSET_HELPER_MANIFEST', None),
        manifest_loader=file_loader(root),
        use_minified=getattr(settings, 'ASSET_HELPER_USE_MINIFIED', False),
        use_sri=getattr(settings, 'ASSET_HELPER_USE_SRI', False),
        sri_algorithm=getattr(settings, 'ASSET_HELPER_SRI_ALGORITHM', 'sha256'),
    )


@lru_cache(maxsize=None)
def get_resolver():
    return resolver_from_settings()


@receiver(setting_changed)
def reset_resolver(*, setting, **_):
    if setting.startswith('ASSET_HELPER_') or setting in ('STATIC_URL', 'STATIC_ROOT'):
        get_resolver.cache_clear()
