"""
Coursework Application Configuration
"""


from django.apps import AppConfig


class CourseworkConfig(AppConfig):
    """
    Application Configuration for Coursework.
    """
    name = 'gradeposting.djangoapps.coursework'
    label = 'coursework'
    verbose_name = 'Coursework'
