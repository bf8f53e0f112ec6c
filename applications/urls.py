from django.urls import path
from . import views

app_name = 'applications'

urlpatterns = [
    # Job seeker
    path('', views.application_list, name='application_list'),
    path('apply/<int:job_id>/', views.apply_job, name='apply_job'),
    path('<int:application_id>/', views.application_detail, name='application_detail'),
    path('<int:application_id>/messages/', views.application_messages, name='application_messages'),
    path('<int:application_id>/exam/submit/', views.submit_exam, name='submit_exam'),

    # Employer
    path('<int:application_id>/status/', views.update_status, name='update_status'),
    path('<int:application_id>/exam/', views.assign_exam, name='assign_exam'),
    path('<int:application_id>/exam/score/', views.score_exam, name='score_exam'),
    path('<int:application_id>/offer/', views.send_offer, name='send_offer'),
]
