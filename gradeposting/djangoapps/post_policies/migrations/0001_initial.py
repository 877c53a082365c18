import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('coursework', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PostPolicy',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('post_manually', models.BooleanField(default=False)),
                ('assignment', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='post_policy', to='coursework.assignment')),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='post_policies', to='coursework.course')),
            ],
            options={
                'verbose_name_plural': 'post policies',
            },
        ),
        migrations.AddConstraint(
            model_name='postpolicy',
            constraint=models.UniqueConstraint(condition=models.Q(('assignment__isnull', True)), fields=('course',), name='post_policies_one_default_per_course'),
        ),
    ]
