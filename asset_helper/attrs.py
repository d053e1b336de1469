from django.utils.html import escape
from django.utils.safestring import mark_safe

from asset_helper.mapping import AssetHelperError


class InvalidAttributesError(AssetHelperError):
    pass


def defaults_for(tag):
    if tag == 'script':
        return {'type': 'text/javascript'}
    if tag == 'link':
        return {'type': 'text/css', 'rel': 'stylesheet'}
    raise ValueError(f'No default attributes for <{tag}>')


def attrs_from_pairs(pairs):
    """
    Turn a flat sequence `name, value, name, value, ...` into a dict. Later duplicates win.
    """
    if len(pairs) % 2 != 0:
        raise InvalidAttributesError(f'Attributes must be given as name/value pairs, got {len(pairs)} values')
    return {str(pairs[i]): str(pairs[i + 1]) for i in range(0, len(pairs), 2)}


def merge_attrs(defaults, overrides):
    result = dict(defaults)
    result.update(overrides)
    return result


def render_attrs(attrs):
    """
    Render HTML attributes as `name="value"` pairs separated by a space. Both names and values
    are escaped, and the output is sorted on the rendered pairs so it doesn't depend on the order
    attributes were given in.
    """
    return mark_safe(' '.join(sorted(f'{escape(key)}="{escape(value)}"' for key, value in attrs.items())))
