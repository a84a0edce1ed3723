import logging

from django import forms
from tinymce.widgets import TinyMCE

from .utils import build_mce_attrs, get_editor_settings

logger = logging.getLogger(__name__)


def editor_widget_for(field_key, attrs=None):
    """
    Build the widget for a rich-text field from its stored settings.

    Returns a TinyMCE widget, or a plain Textarea when the editor is switched
    off for the field.
    """
    editor_settings = get_editor_settings(field_key)
    attrs = {"cols": 80, "rows": 10, "class": "form-control", **(attrs or {})}
    if not editor_settings["use_editor"]:
        logger.debug("Rich-text editor disabled for %s", field_key)
        return forms.Textarea(attrs=attrs)
    return TinyMCE(attrs=attrs, mce_attrs=build_mce_attrs(editor_settings))


def apply_editor_settings(form, field_name, field_key, attrs=None):
    """Swap the widget of ``form.fields[field_name]`` for the configured one."""
    field = form.fields[field_name]
    field.widget = editor_widget_for(field_key, attrs=attrs)
    return field.widget
