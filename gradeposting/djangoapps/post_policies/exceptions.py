"""
Custom exceptions raised by post policies.
"""


from django.core.exceptions import ValidationError


class PostPolicyValidationError(ValidationError):
    """
    Base class for post policies that cannot be saved.
    """
    default_message = 'Invalid post policy.'
    default_code = 'invalid'

    def __init__(self, message=None):
        super().__init__(message or self.default_message, code=self.default_code)


class MissingCourseError(PostPolicyValidationError):
    """
    Raised when a policy has no course, either given directly or
    derivable from its assignment.
    """
    default_message = 'A post policy must belong to a course.'
    default_code = 'missing_course'


class DuplicateScopeError(PostPolicyValidationError):
    """
    Raised when saving a second default policy for a course, or a second
    policy for an assignment.
    """
    default_message = 'A post policy already exists for this scope.'
    default_code = 'duplicate_scope'
