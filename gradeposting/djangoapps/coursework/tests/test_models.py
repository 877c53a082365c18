"""
Tests for coursework models
"""
from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from freezegun import freeze_time
from opaque_keys.edx.locator import CourseLocator

from gradeposting.djangoapps.coursework.models import Course
from gradeposting.djangoapps.coursework.tests.factories import AssignmentFactory, CourseFactory


class CourseworkModelsTest(TestCase):
    """
    Tests for Course and Assignment.
    """
    def test_course_keyed_by_course_key(self):
        course_key = CourseLocator('edX', 'DemoX', 'Demo_Course')
        CourseFactory(id=course_key)
        course = Course.objects.get(id=course_key)
        self.assertEqual(str(course), 'course-v1:edX+DemoX+Demo_Course')

    def test_assignments_belong_to_course(self):
        course = CourseFactory()
        assignment = AssignmentFactory(course=course)
        self.assertEqual(list(course.assignments.all()), [assignment])

    def test_save_bumps_updated_at(self):
        assignment = AssignmentFactory()
        later = timezone.now() + timedelta(hours=1)
        with freeze_time(later):
            assignment.title = 'Renamed'
            assignment.save()
        assignment.refresh_from_db()
        self.assertEqual(assignment.updated_at, later)
