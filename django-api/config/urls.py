from django.urls import include, path

urlpatterns = [
    path("api/", include("box_office.urls")),
]
