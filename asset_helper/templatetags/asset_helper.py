from django import template

from asset_helper.conf import get_resolver

register = template.Library()


@register.simple_tag
def scripttag(name, *attrs):
    return get_resolver().script_tag(name, *attrs)


@register.simple_tag
def linktag(name, *attrs):
    return get_resolver().link_tag(name, *attrs)


@register.simple_tag
def static():
    return get_resolver().static()
