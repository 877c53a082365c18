"""
Signal handlers for post policies.
"""
from logging import getLogger

from django.db.models.signals import post_save
from django.dispatch import receiver

from gradeposting.djangoapps.post_policies.models import PostPolicy

log = getLogger(__name__)


def touch_policy_owner(policy):
    """
    Set the ``updated_at`` marker of the policy's owner to the time the
    policy was saved. An assignment override touches only the assignment; a
    course default touches only the course.

    The owner is written with a queryset update so that no save signals fire
    for it and its other fields are left untouched. The in-memory owner
    instance is updated as well so callers holding it see the new value.
    """
    owner = policy.owner
    touched_at = policy.modified
    type(owner).objects.filter(pk=owner.pk).update(updated_at=touched_at)
    owner.updated_at = touched_at
    log.debug(
        'Touched %s %s at %s for post policy %s',
        owner._meta.model_name,  # pylint: disable=protected-access
        owner.pk,
        touched_at,
        policy.pk,
    )


@receiver(post_save, sender=PostPolicy, dispatch_uid='post_policies.touch_policy_owner')
def post_policy_saved(sender, instance, **kwargs):  # pylint: disable=unused-argument
    """
    Consume the post_save signal for PostPolicy so caches keyed on the owning
    assignment or course see that its effective policy may have changed.
    """
    if kwargs.get('raw'):
        return
    touch_policy_owner(instance)
