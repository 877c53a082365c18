"""
Django model for durable key-value settings.
"""


import logging

from django.conf import settings
from django.core.cache import caches
from django.db import models, transaction
from model_utils.models import TimeStampedModel
from simple_history.models import HistoricalRecords

log = logging.getLogger(__name__)


def _get_cache():
    return caches[getattr(settings, 'SITE_SETTINGS_CACHE_NAME', 'default')]


def _to_setting_value(value):
    """
    Booleans are stored the way they are spelled in config files ("true" /
    "false"); everything else is stored as its string form.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class Setting(TimeStampedModel):
    """
    A single named string setting.

    .. no_pii:
    """
    key = models.CharField(max_length=255, unique=True)
    value = models.TextField()

    history = HistoricalRecords()

    class Meta:
        app_label = 'site_settings'
        verbose_name = 'Setting'
        verbose_name_plural = 'Settings'

    def __str__(self):
        return f'{self.key}={self.value}'

    @classmethod
    def cache_key_name(cls, key):
        """Return the name of the key to use to cache the value of ``key``"""
        return f'site_settings/{cls.__name__}/{key}'

    @classmethod
    def _invalidate(cls, key):
        """
        Drop the cached value now, so this transaction reads its own write,
        and again once the write commits, so a value cached by another
        process from the old committed row in the meantime is not served.
        """
        cache_key = cls.cache_key_name(key)
        _get_cache().delete(cache_key)
        transaction.on_commit(lambda: _get_cache().delete(cache_key))

    @classmethod
    def get(cls, key, default=None):
        """
        Return the stored value for ``key``, or ``default`` if it has never
        been set (or has been removed).
        """
        cache = _get_cache()
        cached = cache.get(cls.cache_key_name(key))
        if cached is not None:
            return cached

        try:
            value = cls.objects.values_list('value', flat=True).get(key=key)
        except cls.DoesNotExist:
            return default

        cache.set(
            cls.cache_key_name(key),
            value,
            getattr(settings, 'SITE_SETTINGS_CACHE_TIMEOUT', 600),
        )
        return value

    @classmethod
    def set(cls, key, value):
        """
        Store ``value`` under ``key``, replacing any previous value. Concurrent
        writers are last-write-wins.
        """
        value = _to_setting_value(value)
        setting, _ = cls.objects.update_or_create(key=key, defaults={'value': value})
        cls._invalidate(key)
        log.info('Setting %s set to %r', key, value)
        return setting

    @classmethod
    def remove(cls, key):
        """
        Delete ``key`` so later reads fall back to their default.
        """
        deleted, _ = cls.objects.filter(key=key).delete()
        cls._invalidate(key)
        if deleted:
            log.info('Setting %s removed', key)
