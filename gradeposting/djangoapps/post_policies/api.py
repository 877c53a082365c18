"""
Python APIs exposed by the post_policies app to other in-process apps.

The grading engine asks ``effective_policy_for`` (or ``effective_post_manually``)
which policy governs an assignment. Instructors' changes go through
``create_or_update``, which upserts: a second default for a course or a second
override for an assignment is never created, the existing record is updated
instead.
"""


import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from opaque_keys.edx.keys import CourseKey

from gradeposting.djangoapps.coursework.models import Course
from gradeposting.djangoapps.post_policies.exceptions import DuplicateScopeError, MissingCourseError
from gradeposting.djangoapps.post_policies.models import PostPolicy

log = logging.getLogger(__name__)

# Grades post automatically unless a course or assignment says otherwise.
DEFAULT_POST_MANUALLY = False


def _get_course(course_or_key):
    """
    Returns a Course given a Course, a CourseKey or a course key string.
    """
    if isinstance(course_or_key, Course):
        return course_or_key
    if isinstance(course_or_key, str):
        course_or_key = CourseKey.from_string(course_or_key)
    return Course.objects.get(id=course_or_key)


def _scope_queryset(course, assignment=None):
    if assignment is not None:
        return PostPolicy.objects.filter(assignment=assignment)
    return PostPolicy.objects.filter(course=course, assignment__isnull=True)


def _retry_on_scope_race(func, scope):
    """
    Run ``func`` in its own transaction, re-running it if another writer
    created the policy for ``scope`` between our read and our write.

    Only the uniqueness races are retried; after
    POST_POLICIES_MAX_CREATE_ATTEMPTS attempts the last error propagates.
    """
    max_attempts = max(1, getattr(settings, 'POST_POLICIES_MAX_CREATE_ATTEMPTS', 3))
    for attempt in range(1, max_attempts + 1):
        try:
            with transaction.atomic():
                return func()
        except (IntegrityError, DuplicateScopeError):
            if attempt == max_attempts:
                raise
            log.warning(
                'Lost a race creating the post policy for %s (attempt %d of %d), retrying.',
                scope, attempt, max_attempts,
            )


def create_or_update(course=None, assignment=None, post_manually=DEFAULT_POST_MANUALLY):
    """
    Sets ``post_manually`` on the policy for the given scope, creating the
    policy if the scope has none yet.

    With an assignment the scope is that assignment's override, and the
    course defaults to the assignment's course. Without one the scope is the
    course default.

    Raises:
        MissingCourseError: if neither a course nor an assignment is given.
    """
    if course is None and assignment is not None:
        course = assignment.course
    if course is None:
        raise MissingCourseError()
    course = _get_course(course)

    def _upsert():
        policy = _scope_queryset(course, assignment).select_for_update().first()
        if policy is None:
            policy = PostPolicy(course=course, assignment=assignment)
        else:
            # Share the caller's instances so the owner touch is visible to them.
            policy.course = course
            if assignment is not None:
                policy.assignment = assignment
        policy.post_manually = post_manually
        policy.save()
        return policy

    scope = f'assignment {assignment.pk}' if assignment is not None else f'course {course.id}'
    return _retry_on_scope_race(_upsert, scope)


def default_for(course):
    """
    Returns the default policy for the course, creating it with
    ``post_manually=False`` the first time it is asked for.
    """
    course = _get_course(course)

    def _get_or_create():
        # A locking read, so a retry sees a default committed by the writer
        # that beat us even inside an enclosing transaction.
        policy = _scope_queryset(course).select_for_update().first()
        if policy is None:
            policy = PostPolicy(course=course, post_manually=DEFAULT_POST_MANUALLY)
            policy.save()
            log.info('Created default post policy for course %s', course.id)
        return policy

    return _retry_on_scope_race(_get_or_create, f'course {course.id}')


def override_for(assignment):
    """
    Returns the assignment's own policy, or None if it has none. Never
    creates one.
    """
    policy = PostPolicy.objects.filter(assignment=assignment).first()
    if policy is not None:
        policy.assignment = assignment
    return policy


def effective_policy_for(assignment):
    """
    Returns the policy governing the assignment: its override if it has one,
    otherwise its course's default.
    """
    policy = override_for(assignment)
    if policy is None:
        policy = default_for(assignment.course)
    return policy


def effective_post_manually(assignment):
    """
    Returns True if grades for the assignment are held until posted.
    """
    return effective_policy_for(assignment).post_manually
