"""
Django admin page for site settings
"""


from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from gradeposting.djangoapps.site_settings.models import Setting


@admin.register(Setting)
class SettingAdmin(SimpleHistoryAdmin):
    list_display = ('key', 'value', 'modified')
    readonly_fields = ('created', 'modified')
    search_fields = ('key',)
    history_list_display = ('value',)
