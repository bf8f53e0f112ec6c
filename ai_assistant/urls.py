from django.urls import path
from . import views

app_name = 'ai_assistant'

urlpatterns = [
    path('api/chat/', views.chatbot_api, name='chatbot_api'),
    path('api/match/<int:job_id>/', views.match_score_api, name='match_score_api'),
    path('api/job-description/', views.generate_job_description_api, name='job_description_api'),
    path('api/candidates/<int:seeker_id>/analyze/', views.analyze_candidate_api, name='analyze_candidate_api'),
]
