from django.urls import path
from . import views

app_name = 'admin_panel'

urlpatterns = [
    # Main dashboard
    path('', views.admin_dashboard, name='dashboard'),

    # Job moderation
    path('jobs/', views.job_management, name='job_management'),
    path('jobs/<int:job_id>/approve/', views.approve_job, name='approve_job'),
    path('jobs/<int:job_id>/delete/', views.delete_job, name='delete_job'),
    path('jobs/<int:job_id>/edit/', views.edit_job, name='edit_job'),

    # User management
    path('users/', views.user_management, name='user_management'),
    path('users/<int:user_id>/update/', views.update_user, name='update_user'),

    # Support chats
    path('support/', views.support_inbox, name='support_inbox'),
    path('support/<int:user_id>/', views.support_conversation, name='support_conversation'),
]
