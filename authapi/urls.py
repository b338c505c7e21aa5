from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import (
    AuthApiIndexView,
    RegisterView,
    UserProfileView,
    SetPasswordView,
    DeleteUserView,
)

urlpatterns = [
    path("", AuthApiIndexView.as_view(), name="auth-index"),
    path("register/", RegisterView.as_view(), name="auth-register"),
    path("login/", TokenObtainPairView.as_view(), name="auth-login"),
    path("refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("me/", UserProfileView.as_view(), name="auth-me"),
    path("set-password/", SetPasswordView.as_view(), name="auth-set-password"),
    path("delete/", DeleteUserView.as_view(), name="auth-delete"),
]
