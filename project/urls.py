from django.urls import include, path

urlpatterns = [
    path("solid/", include("solidprofile.urls")),
]
