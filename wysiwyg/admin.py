from django.contrib import admin

from .forms import EditorFieldSettingsForm
from .models import EditorFieldSettings


@admin.register(EditorFieldSettings)
class EditorFieldSettingsAdmin(admin.ModelAdmin):
    form = EditorFieldSettingsForm
    list_display = ("field_key", "label", *EditorFieldSettings.CHECKBOX_SETTINGS)
    list_editable = EditorFieldSettings.CHECKBOX_SETTINGS
    search_fields = ("field_key", "label")
