from django.urls import path

from . import views

app_name = "wysiwyg"

urlpatterns = [
    path("report/", views.settings_report, name="report"),
    path("preview/", views.editor_preview, name="preview"),
]
