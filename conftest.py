import pytest


def pytest_runtest_setup(item):
    jinja2_marker = item.get_closest_marker('jinja2')
    if jinja2_marker is not None:
        try:
            import jinja2  # noqa: F401
        except ImportError:
            pytest.skip('test requires jinja2')


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(session, config, items):
    items[:] = sorted(items, key=lambda x: x.fspath)
