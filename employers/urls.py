from django.urls import path
from . import views

app_name = 'employer'

urlpatterns = [
    # Dashboard and company profile
    path('dashboard/', views.employer_dashboard, name='dashboard'),
    path('profile/edit/', views.edit_company, name='edit_company'),
    path('companies/<int:employer_id>/logo/', views.company_logo, name='company_logo'),

    # Job management
    path('jobs/', views.posted_jobs, name='posted_jobs'),
    path('post-job/', views.post_job, name='post_job'),
    path('jobs/release-held/', views.release_held_jobs, name='release_held_jobs'),
    path('jobs/<int:job_id>/applicants/', views.job_applicants_view, name='job_applicants'),

    # Application management
    path('applications/', views.applications_list, name='applications'),

    # Candidates
    path('candidates/', views.candidate_search, name='candidate_search'),
    path('candidates/<int:seeker_id>/', views.candidate_profile, name='candidate_profile'),
    path('candidates/<int:seeker_id>/contact/', views.contact_candidate_view, name='contact_candidate'),
    path('candidates/<int:seeker_id>/resume/', views.download_candidate_resume, name='candidate_resume'),

    # Support
    path('support/', views.support_chat, name='support_chat'),
]
