from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Registration and password reset
    path('register/', views.register, name='register'),
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('security-questions/', views.security_questions, name='security_questions'),
    path('forgot-password/', views.forgot_password, name='forgot_password'),
    path('reset-password/', views.reset_password, name='reset_password'),
    path('me/', views.me, name='me'),
    path('users/<int:user_id>/picture/', views.profile_picture, name='profile_picture'),

    # Job seeker profile
    path('seeker/dashboard/', views.seeker_dashboard, name='seeker_dashboard'),
    path('seeker/profile/', views.update_profile, name='update_profile'),
    path('seeker/resume/', views.upload_resume, name='upload_resume'),
    path('seeker/resume/download/', views.download_resume, name='download_resume'),
    path('seeker/experience/', views.add_experience, name='add_experience'),
    path('seeker/experience/<str:entry_id>/delete/', views.remove_experience, name='remove_experience'),
    path('seeker/education/', views.add_education, name='add_education'),
    path('seeker/education/<str:entry_id>/delete/', views.remove_education, name='remove_education'),
    path('seeker/support/', views.seeker_support_chat, name='seeker_support_chat'),

    # Premium
    path('premium/', views.premium_plans, name='premium_plans'),
    path('premium/checkout/', views.premium_checkout, name='premium_checkout'),
    path('premium/complete/', views.premium_complete, name='premium_complete'),
]
