from django.urls import path

from .views import RegisterEmployeeView, UserProfileView

app_name = 'accounts'

urlpatterns = [
    path('register/', RegisterEmployeeView.as_view(), name='register'),
    path('profile/', UserProfileView.as_view(), name='user-profile'),
]
