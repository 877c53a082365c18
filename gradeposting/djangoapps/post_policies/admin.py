"""
Django admin page for post policies
"""


from django.contrib import admin

from gradeposting.djangoapps.post_policies.models import PostPolicy


@admin.register(PostPolicy)
class PostPolicyAdmin(admin.ModelAdmin):
    """
    Saving through the admin goes through PostPolicy.save, so the owning
    course or assignment is touched as for any other write.
    """
    list_display = ('id', 'course', 'assignment', 'post_manually', 'modified')
    list_filter = ('post_manually',)
    raw_id_fields = ('course', 'assignment')
    readonly_fields = ('created', 'modified')
    search_fields = ('course__id',)
