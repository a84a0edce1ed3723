from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="EditorFieldSettings",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "field_key",
                    models.CharField(
                        help_text="Field identifier, e.g. 'cms.page.content'",
                        max_length=150,
                        unique=True,
                    ),
                ),
                (
                    "label",
                    models.CharField(
                        blank=True,
                        help_text="Human readable name shown in the settings report",
                        max_length=100,
                    ),
                ),
                (
                    "use_editor",
                    models.BooleanField(
                        default=True,
                        help_text="Render the field with the rich-text editor instead of a plain textarea",
                    ),
                ),
                (
                    "allow_source_editing",
                    models.BooleanField(
                        default=False,
                        help_text="Add the HTML source code button to the editor toolbar",
                    ),
                ),
                (
                    "paste_as_text",
                    models.BooleanField(
                        default=False,
                        help_text="Strip formatting from pasted content",
                    ),
                ),
                (
                    "show_menubar",
                    models.BooleanField(
                        default=True,
                        help_text="Show the editor menu bar above the toolbar",
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Editor Field Settings",
                "verbose_name_plural": "Editor Field Settings",
                "ordering": ["field_key"],
            },
        ),
    ]
