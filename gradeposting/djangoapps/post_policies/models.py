"""
Models for grade post policies.

A PostPolicy with no assignment is its course's default policy; a PostPolicy
with an assignment is that assignment's override. Both always belong to a
course. One override per assignment is a unique index. One default per
course is a conditional unique constraint where the database supports one;
on every database, saving a default first locks the course row so that
writers of the same default take turns. The rules are checked inside the
save transaction so callers get a DuplicateScopeError rather than an
IntegrityError in the common case.
"""


from django.db import models, transaction
from django.db.models import Q
from model_utils.models import TimeStampedModel

from gradeposting.djangoapps.coursework.models import Assignment, Course
from gradeposting.djangoapps.post_policies.exceptions import DuplicateScopeError, MissingCourseError


class PostPolicy(TimeStampedModel):
    """
    Whether grades for a course (or one of its assignments) are posted
    manually by an instructor or automatically as soon as they are entered.

    .. no_pii:
    """
    course = models.ForeignKey(Course, related_name='post_policies', on_delete=models.CASCADE)
    assignment = models.OneToOneField(
        Assignment,
        related_name='post_policy',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
    )
    post_manually = models.BooleanField(default=False)

    class Meta:
        app_label = 'post_policies'
        verbose_name_plural = 'post policies'
        constraints = [
            models.UniqueConstraint(
                fields=['course'],
                condition=Q(assignment__isnull=True),
                name='post_policies_one_default_per_course',
            ),
        ]

    def __str__(self):
        scope = f'assignment {self.assignment_id}' if self.is_assignment_policy else 'course default'
        return f'PostPolicy({self.course_id}, {scope}, post_manually={self.post_manually})'

    @property
    def is_assignment_policy(self):
        return self.assignment_id is not None

    @property
    def owner(self):
        """
        The record whose freshness marker tracks this policy: the assignment
        for an override, the course for a default.
        """
        return self.assignment if self.is_assignment_policy else self.course

    def set_course_from_assignment(self):
        """
        Fill in the course from the assignment when only the assignment was
        given. An explicitly given course is left alone.
        """
        if self.course_id is None and self.assignment_id is not None:
            self.course = self.assignment.course

    def scope_siblings(self):
        """
        Other saved policies occupying the same scope as this one.
        """
        if self.is_assignment_policy:
            siblings = PostPolicy.objects.filter(assignment_id=self.assignment_id)
        else:
            siblings = PostPolicy.objects.filter(course_id=self.course_id, assignment__isnull=True)
        if self.pk is not None:
            siblings = siblings.exclude(pk=self.pk)
        return siblings

    def lock_scope(self):
        """
        Take a row lock that every writer of this policy's scope must take.

        An override is guarded by its unique index. A default has no row to
        lock until it exists, so writers queue on the course row instead.
        Must be called inside a transaction.
        """
        if not self.is_assignment_policy:
            list(Course.objects.select_for_update().filter(pk=self.course_id).values_list('pk', flat=True))

    def validate_scope(self):
        """
        Raises MissingCourseError or DuplicateScopeError if this policy
        cannot be saved.

        The sibling lookup is a locking read so it sees rows committed by a
        writer that held the scope lock before us.
        """
        if self.course_id is None:
            raise MissingCourseError()
        if list(self.scope_siblings().select_for_update().values_list('pk', flat=True)[:1]):
            raise DuplicateScopeError()

    def full_clean(self, *args, **kwargs):  # pylint: disable=arguments-differ
        self.set_course_from_assignment()
        super().full_clean(*args, **kwargs)

    def save(self, *args, **kwargs):  # pylint: disable=arguments-differ
        """
        The scope checks, the write and the owner touch done by the post_save
        handler commit or roll back together.
        """
        self.set_course_from_assignment()
        if self.course_id is None:
            raise MissingCourseError()
        with transaction.atomic():
            self.lock_scope()
            self.validate_scope()
            super().save(*args, **kwargs)
