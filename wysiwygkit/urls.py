###################################################################################
# URL configuration for the wysiwygkit project.
#
# The `urlpatterns` list routes URLs to views. For more information please see:
#    https://docs.djangoproject.com/en/5.1/topics/http/urls/
###################################################################################


from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="wysiwyg:report", permanent=False)),
    path("admin/", admin.site.urls),
    path("tinymce/", include("tinymce.urls")),
    path("wysiwyg/", include("wysiwyg.urls")),
]
