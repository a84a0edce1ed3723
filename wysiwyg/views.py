import logging

from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import render

from .forms import PREVIEW_FIELD_KEY, EditorPreviewForm
from .models import EditorFieldSettings
from .utils import get_config_variables

logger = logging.getLogger(__name__)


@staff_member_required
def settings_report(request):
    """
    Admin report of the rich-text editor configuration.

    One table lists the configuration variables, a second one the checkbox
    settings stored for each field.
    """
    field_rows = [
        {
            "field_key": row.field_key,
            "label": row.label,
            "checkboxes": [getattr(row, name) for name in row.CHECKBOX_SETTINGS],
            "updated_at": row.updated_at,
        }
        for row in EditorFieldSettings.objects.all()
    ]
    checkbox_headers = [
        EditorFieldSettings._meta.get_field(name).verbose_name.capitalize()
        for name in EditorFieldSettings.CHECKBOX_SETTINGS
    ]
    context = {
        "config_variables": get_config_variables(),
        "checkbox_headers": checkbox_headers,
        "field_rows": field_rows,
    }
    return render(request, "wysiwyg/settings_report.html", context)


@staff_member_required
def editor_preview(request):
    """Render the preview field so editor settings can be tried out."""
    form = EditorPreviewForm(request.POST or None)
    submitted = None
    if request.method == "POST" and form.is_valid():
        submitted = form.cleaned_data["body"]
        logger.info("Editor preview submitted by %s", request.user)
    return render(
        request,
        "wysiwyg/editor_preview.html",
        {"form": form, "field_key": PREVIEW_FIELD_KEY, "submitted": submitted},
    )
