from django.urls import path

from realtime_sandbox.pages.views import index

urlpatterns = [
    path("", index, name="index"),
]
