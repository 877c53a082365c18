"""
Post Policies Application Configuration

Signal handlers are connected here.
"""


from django.apps import AppConfig


class PostPoliciesConfig(AppConfig):
    """
    Application Configuration for Post Policies.
    """
    name = 'gradeposting.djangoapps.post_policies'
    label = 'post_policies'
    verbose_name = 'Post Policies'

    def ready(self):
        """
        Connect handlers that touch the owner of a policy when it is saved.
        """
        # Can't import models at module level in AppConfigs, and models get
        # included from the signal handlers
        from .signals import handlers  # pylint: disable=unused-import
