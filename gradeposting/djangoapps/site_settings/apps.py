"""
Site Settings Application Configuration
"""


from django.apps import AppConfig


class SiteSettingsConfig(AppConfig):
    """
    Application Configuration for Site Settings.
    """
    name = 'gradeposting.djangoapps.site_settings'
    label = 'site_settings'
    verbose_name = 'Site Settings'
