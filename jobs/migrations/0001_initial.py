from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='JobPost',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('required_skills', models.TextField(blank=True, null=True)),
                ('status', models.CharField(choices=[('PENDING_ADMIN', 'Pending Admin Approval'), ('ACTIVE', 'Active'), ('ON_HOLD', 'On Hold')], default='PENDING_ADMIN', max_length=20)),
                ('is_featured', models.BooleanField(default=False)),
                ('job_type', models.CharField(blank=True, choices=[('FULL-TIME', 'Full Time'), ('PART-TIME', 'Part Time'), ('REMOTE', 'Remote'), ('FREELANCE', 'Freelance'), ('CONTRACT', 'Contract'), ('TEMPORARY', 'Temporary')], max_length=20, null=True)),
                ('job_category', models.CharField(blank=True, choices=[('Design & Creative', 'Design & Creative'), ('Design & Development', 'Design & Development'), ('Sales & Marketing', 'Sales & Marketing'), ('Mobile Application', 'Mobile Application'), ('Construction', 'Construction'), ('Information Technology', 'Information Technology'), ('Real Estate', 'Real Estate'), ('Content Writer', 'Content Writer'), ('Digital Marketing', 'Digital Marketing'), ('Software Development', 'Software Development'), ('Human Resources', 'Human Resources'), ('Finance', 'Finance'), ('Sales', 'Sales'), ('Education', 'Education')], max_length=100, null=True)),
                ('location_city', models.CharField(blank=True, max_length=100, null=True)),
                ('location_country', models.CharField(blank=True, max_length=100, null=True)),
                ('remote_option', models.BooleanField(default=False)),
                ('salary_min', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('salary_max', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('posted_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('expires_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('posted_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='posted_jobs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-is_featured', '-posted_at'],
                'indexes': [models.Index(fields=['status', '-is_featured', '-posted_at'], name='jobpost_status_featured_idx')],
            },
        ),
    ]
