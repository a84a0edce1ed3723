from django import forms

from .models import EditorFieldSettings
from .widgets import apply_editor_settings

PREVIEW_FIELD_KEY = "wysiwyg.preview.body"


class EditorFieldSettingsForm(forms.ModelForm):
    """Settings form with one checkbox per editor option."""

    class Meta:
        model = EditorFieldSettings
        fields = ["field_key", "label", *EditorFieldSettings.CHECKBOX_SETTINGS]
        widgets = {
            "field_key": forms.TextInput(attrs={"class": "form-control"}),
            "label": forms.TextInput(attrs={"class": "form-control"}),
            "use_editor": forms.CheckboxInput(attrs={"class": "form-check-input"}),
            "allow_source_editing": forms.CheckboxInput(
                attrs={"class": "form-check-input"}
            ),
            "paste_as_text": forms.CheckboxInput(attrs={"class": "form-check-input"}),
            "show_menubar": forms.CheckboxInput(attrs={"class": "form-check-input"}),
        }
        labels = {
            "use_editor": "Use rich-text editor",
            "allow_source_editing": "Allow HTML source editing",
            "paste_as_text": "Paste as plain text",
            "show_menubar": "Show menu bar",
        }

    def clean_field_key(self):
        field_key = self.cleaned_data["field_key"].strip()
        if field_key.count(".") < 2:
            raise forms.ValidationError(
                "Use the form '<app>.<form or model>.<field>', e.g. 'cms.page.content'."
            )
        return field_key


class EditorPreviewForm(forms.Form):
    """Single rich-text field rendered with the preview field's settings."""

    body = forms.CharField(label="Body", required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        apply_editor_settings(self, "body", PREVIEW_FIELD_KEY)
