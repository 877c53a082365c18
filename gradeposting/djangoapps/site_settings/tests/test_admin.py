"""
Tests for the site settings admin
"""
from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from gradeposting.djangoapps.site_settings.models import Setting


class SettingAdminTest(TestCase):
    """
    Tests that staff can see settings and their history in the admin.
    """
    def setUp(self):
        super().setUp()
        user = get_user_model().objects.create_superuser('staff', 'staff@example.com', 'test')
        self.client.force_login(user)
        self.setting = Setting.set('post_policies_enabled', True)

    def test_changelist(self):
        response = self.client.get(reverse('admin:site_settings_setting_changelist'))
        self.assertContains(response, 'post_policies_enabled')

    def test_history(self):
        Setting.set('post_policies_enabled', False)
        response = self.client.get(reverse('admin:site_settings_setting_history', args=[self.setting.pk]))
        self.assertEqual(response.status_code, 200)
