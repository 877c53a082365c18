"""
Default unit test configuration and fixtures.
"""

from unittest import TestCase

import pytest
from django.core.cache import caches

# When using self.assertEqual, diffs are truncated. We don't want that, always
# show the whole diff.
TestCase.maxDiff = None


@pytest.fixture(autouse=True, scope='function')
def _clear_django_caches():
    """
    Setting values are cached outside the database, so they survive the
    per-test transaction rollback. Start and finish every test with empty
    caches.
    """
    for cache in caches.all():
        cache.clear()
    yield
    for cache in caches.all():
        cache.clear()
