"""
Courses and the assignments within them.

Only the parts of a course and an assignment that grade posting depends on
live here: identity, ownership, a display title and the ``updated_at``
freshness marker that caches key on.
"""


from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.fields import AutoCreatedField, AutoLastModifiedField
from opaque_keys.edx.django.models import CourseKeyField


class Course(models.Model):
    """
    A course run, identified by its course key.

    .. no_pii:
    """
    id = CourseKeyField(db_index=True, primary_key=True, max_length=255)
    display_name = models.TextField(blank=True, default='')

    created = AutoCreatedField(_('created'))
    # Bumped whenever state that derives from this course changes, so
    # consumers caching on it know to refetch.
    updated_at = AutoLastModifiedField(_('updated at'), db_index=True)

    class Meta:
        app_label = 'coursework'

    def __str__(self):
        return str(self.id)


class Assignment(models.Model):
    """
    A gradable assignment belonging to exactly one course.

    .. no_pii:
    """
    course = models.ForeignKey(Course, related_name='assignments', on_delete=models.CASCADE)
    title = models.CharField(max_length=255)

    created = AutoCreatedField(_('created'))
    updated_at = AutoLastModifiedField(_('updated at'), db_index=True)

    class Meta:
        app_label = 'coursework'

    def __str__(self):
        return f'{self.title} ({self.course_id})'
