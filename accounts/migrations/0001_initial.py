from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('ADMIN', 'Admin'), ('EMPLOYER', 'Employer'), ('JOB_SEEKER', 'Job Seeker')], default='JOB_SEEKER', max_length=20)),
                ('phone_number', models.CharField(blank=True, max_length=20, null=True)),
                ('profile_picture_filename', models.CharField(blank=True, max_length=255, null=True)),
                ('premium_tier', models.CharField(choices=[('BASIC', 'Basic'), ('PREMIUM', 'Premium'), ('PRO', 'Pro')], default='BASIC', max_length=20)),
                ('company_name', models.CharField(blank=True, max_length=200, null=True)),
                ('company_description', models.TextField(blank=True, null=True)),
                ('company_location', models.CharField(blank=True, max_length=200, null=True)),
                ('company_logo_filename', models.CharField(blank=True, max_length=255, null=True)),
                ('security_question', models.CharField(blank=True, choices=[('pet', 'What was the name of your first pet?'), ('car', 'What was the make and model of your first car?'), ('maiden_name', "What is your mother's maiden name?"), ('high_school', 'What is the name of the high school you attended?'), ('first_school', 'What was the name of your elementary school?'), ('birth_city', 'In what city were you born?'), ('movie', 'What is your favorite movie?'), ('food', 'What is your favorite food?'), ('best_friend', 'What is the name of your childhood best friend?'), ('street', 'What street did you grow up on?')], max_length=50, null=True)),
                ('security_answer', models.CharField(blank=True, max_length=255, null=True)),
                ('admin_support_chat_log', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='JobSeekerProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('city', models.CharField(blank=True, max_length=100, null=True)),
                ('preferred_location', models.CharField(blank=True, max_length=200, null=True)),
                ('current_title', models.CharField(blank=True, max_length=200, null=True)),
                ('profile_headline', models.CharField(blank=True, max_length=255, null=True)),
                ('years_experience', models.PositiveIntegerField(blank=True, null=True)),
                ('skills', models.TextField(blank=True, null=True)),
                ('job_type', models.CharField(blank=True, max_length=20, null=True)),
                ('expected_salary', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('resume_filename', models.CharField(blank=True, max_length=255, null=True)),
                ('work_experience', models.JSONField(blank=True, default=list)),
                ('education', models.JSONField(blank=True, default=list)),
                ('support_chat_log', models.JSONField(blank=True, default=list)),
                ('offering_services', models.BooleanField(default=True)),
                ('completeness_score', models.PositiveSmallIntegerField(default=0)),
                ('is_featured', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='seeker_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-is_featured', '-id'],
            },
        ),
    ]
