from django.apps import AppConfig


class AssetHelperConfig(AppConfig):
    name = 'asset_helper'
    verbose_name = 'Asset helper'
    default = True

    def ready(self):
        from asset_helper.conf import get_resolver

        # A missing or broken manifest should stop startup, not the first page render
        get_resolver()
