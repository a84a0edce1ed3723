from django.db import models


class EditorFieldSettings(models.Model):
    """
    Rich-text editor options for one form field.

    ``field_key`` names the field as ``<app>.<form or model>.<field>``, e.g.
    ``cms.page.content``. Fields without a row fall back to
    ``settings.WYSIWYG_EDITOR_DEFAULTS``.
    """

    # Checkbox options in display order
    CHECKBOX_SETTINGS = (
        "use_editor",
        "allow_source_editing",
        "paste_as_text",
        "show_menubar",
    )

    field_key = models.CharField(
        max_length=150,
        unique=True,
        help_text="Field identifier, e.g. 'cms.page.content'",
    )
    label = models.CharField(
        max_length=100,
        blank=True,
        help_text="Human readable name shown in the settings report",
    )
    use_editor = models.BooleanField(
        default=True,
        help_text="Render the field with the rich-text editor instead of a plain textarea",
    )
    allow_source_editing = models.BooleanField(
        default=False,
        help_text="Add the HTML source code button to the editor toolbar",
    )
    paste_as_text = models.BooleanField(
        default=False,
        help_text="Strip formatting from pasted content",
    )
    show_menubar = models.BooleanField(
        default=True,
        help_text="Show the editor menu bar above the toolbar",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Editor Field Settings"
        verbose_name_plural = "Editor Field Settings"
        ordering = ["field_key"]

    def __str__(self):
        return self.label or self.field_key

    def as_dict(self):
        return {name: getattr(self, name) for name in self.CHECKBOX_SETTINGS}
