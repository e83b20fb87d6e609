from django.urls import path

from .views import UserSignupView, UserLoginView, UserTokenRefreshView, UserProfileView

urlpatterns = [
    path('signup/', UserSignupView.as_view(), name='user-signup'),
    path('login/', UserLoginView.as_view(), name='user-login'),
    path('token/refresh/', UserTokenRefreshView.as_view(), name='user-token-refresh'),
    path('', UserProfileView.as_view(), name='user-profile'),
]
