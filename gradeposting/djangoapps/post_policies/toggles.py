"""
Toggles for post policies.
"""
import logging

from gradeposting.djangoapps.site_settings.models import Setting

log = logging.getLogger(__name__)


class StoredSettingToggle:
    """
    A process-wide boolean toggle stored in the durable Setting store.

    The underlying setting can be unset, "true", or any other string. Only
    "true" reads as enabled; an unset setting and every other value read as
    disabled. Consumers only ever branch on enabled/disabled, so there is no
    separate "unset" answer.
    """

    ENABLED_VALUE = 'true'
    DISABLED_VALUE = 'false'

    def __init__(self, name, module_name=None):
        self.name = name
        self.module_name = module_name

    def __repr__(self):
        return f'{self.__class__.__name__}({self.name!r})'

    def is_enabled(self):
        return Setting.get(self.name, self.DISABLED_VALUE) == self.ENABLED_VALUE

    def enable(self):
        Setting.set(self.name, self.ENABLED_VALUE)
        log.info('Toggle %s enabled', self.name)

    def disable(self):
        Setting.set(self.name, self.DISABLED_VALUE)
        log.info('Toggle %s disabled', self.name)


# .. toggle_name: post_policies_enabled
# .. toggle_implementation: StoredSettingToggle
# .. toggle_default: False
# .. toggle_description: Turns on grade post policies. When enabled, the grading engine consults the
#   effective post policy of an assignment to decide whether entered grades are held until an
#   instructor posts them. Only the exact value "true" enables the feature.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2018-12-01
POST_POLICIES_FEATURE = StoredSettingToggle('post_policies_enabled', module_name=__name__)


def is_post_policies_feature_enabled():
    """
    Returns whether post policies are in effect for this deployment.
    """
    return POST_POLICIES_FEATURE.is_enabled()


def enable_post_policies_feature():
    POST_POLICIES_FEATURE.enable()


def disable_post_policies_feature():
    POST_POLICIES_FEATURE.disable()
