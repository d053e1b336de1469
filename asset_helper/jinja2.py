from jinja2 import Environment

from asset_helper.conf import get_resolver


def scripttag(name, *attrs):
    return get_resolver().script_tag(name, *attrs)


def linktag(name, *attrs):
    return get_resolver().link_tag(name, *attrs)


def static():
    return get_resolver().static()


def environment(**options):
    """
    Environment factory for Django's Jinja2 backend:

    .. code-block:: python

        TEMPLATES = [
            {
                'BACKEND': 'django.template.backends.jinja2.Jinja2',
                'OPTIONS': {'environment': 'asset_helper.jinja2.environment'},
            },
        ]

    The helpers look up the resolver on every call, so they follow changes to the settings.
    """
    env = Environment(**options)
    env.globals.update(
        scripttag=scripttag,
        linktag=linktag,
        static=static,
    )
    return env
