"""
Django admin page for coursework models
"""


from django.contrib import admin

from gradeposting.djangoapps.coursework.models import Assignment, Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('id', 'display_name', 'updated_at')
    readonly_fields = ('created', 'updated_at')
    search_fields = ('id', 'display_name')


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'course', 'updated_at')
    list_filter = ('course',)
    readonly_fields = ('created', 'updated_at')
    search_fields = ('title',)
