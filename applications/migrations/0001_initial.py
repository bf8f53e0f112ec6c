from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

STATUS_CHOICES = [
    ('APPLIED', 'Applied'),
    ('REVIEWED', 'Reviewed'),
    ('ACCEPTED', 'Accepted'),
    ('REJECTED', 'Rejected'),
    ('HIRED', 'Hired'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('jobs', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Application',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=STATUS_CHOICES, default='APPLIED', max_length=20)),
                ('message_log', models.JSONField(blank=True, default=list)),
                ('exam_questions', models.TextField(blank=True, null=True)),
                ('exam_answers', models.TextField(blank=True, null=True)),
                ('exam_submitted', models.BooleanField(default=False)),
                ('exam_score', models.IntegerField(default=0)),
                ('offer_start_date', models.DateField(blank=True, null=True)),
                ('offer_start_time', models.CharField(blank=True, max_length=20, null=True)),
                ('offer_location', models.CharField(blank=True, max_length=255, null=True)),
                ('offer_required_papers', models.TextField(blank=True, null=True)),
                ('applied_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('job', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='jobs.jobpost')),
                ('seeker', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-applied_at'],
                'constraints': [models.UniqueConstraint(fields=('seeker', 'job'), name='unique_application_per_seeker_job')],
            },
        ),
        migrations.CreateModel(
            name='ApplicationStatus',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('old_status', models.CharField(blank=True, choices=STATUS_CHOICES, max_length=20, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, max_length=20)),
                ('changed_at', models.DateTimeField(auto_now_add=True)),
                ('application', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='status_history', to='applications.application')),
                ('changed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'Application status history',
                'ordering': ['changed_at', 'id'],
            },
        ),
    ]
