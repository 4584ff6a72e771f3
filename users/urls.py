from django.urls import path

from .views import CurrentUserView, LoginView, LogoutView, RegisterView, UserProfileView

app_name = "users"

urlpatterns = [
    path("auth/register/", RegisterView.as_view(), name="register"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("auth/me/", CurrentUserView.as_view(), name="me"),
    path("auth/profile/", UserProfileView.as_view(), name="profile"),
]
