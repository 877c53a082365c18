"""
Tests for the post policies admin
"""
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from gradeposting.djangoapps.post_policies.models import PostPolicy
from gradeposting.djangoapps.post_policies.tests.factories import (
    AssignmentPostPolicyFactory,
    CourseDefaultPostPolicyFactory
)


class PostPolicyAdminTest(TestCase):
    """
    Tests that staff can inspect post policies in the admin.
    """
    def setUp(self):
        super().setUp()
        user = get_user_model().objects.create_superuser('staff', 'staff@example.com', 'test')
        self.client.force_login(user)

    def test_registered(self):
        self.assertTrue(admin.site.is_registered(PostPolicy))

    def test_changelist(self):
        default = CourseDefaultPostPolicyFactory()
        AssignmentPostPolicyFactory(assignment__course=default.course)
        response = self.client.get(reverse('admin:post_policies_postpolicy_changelist'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, str(default.course_id))
