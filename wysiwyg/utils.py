import logging

from django.conf import settings

from .models import EditorFieldSettings

logger = logging.getLogger(__name__)

BUILTIN_DEFAULTS = {
    "use_editor": True,
    "allow_source_editing": False,
    "paste_as_text": False,
    "show_menubar": True,
}

# TinyMCE options worth showing on the settings report
REPORTED_TINYMCE_OPTIONS = (
    "height",
    "menubar",
    "plugins",
    "toolbar",
    "relative_urls",
    "remove_script_host",
    "convert_urls",
)


def get_default_editor_settings():
    defaults = dict(BUILTIN_DEFAULTS)
    configured = getattr(settings, "WYSIWYG_EDITOR_DEFAULTS", None) or {}
    unknown = set(configured) - set(BUILTIN_DEFAULTS)
    if unknown:
        logger.warning(
            "Ignoring unknown WYSIWYG_EDITOR_DEFAULTS keys: %s",
            ", ".join(sorted(unknown)),
        )
    defaults.update({k: bool(v) for k, v in configured.items() if k in defaults})
    return defaults


def get_editor_settings(field_key):
    """Return the effective checkbox settings for ``field_key``."""
    row = EditorFieldSettings.objects.filter(field_key=field_key).first()
    if row is None:
        return get_default_editor_settings()
    return row.as_dict()


def build_mce_attrs(editor_settings):
    """Translate checkbox settings into django-tinymce ``mce_attrs``."""
    base = getattr(settings, "TINYMCE_DEFAULT_CONFIG", {})
    mce_attrs = {"paste_as_text": editor_settings["paste_as_text"]}
    if not editor_settings["show_menubar"]:
        mce_attrs["menubar"] = False
    if editor_settings["allow_source_editing"]:
        plugins = base.get("plugins", "")
        toolbar = base.get("toolbar", "")
        mce_attrs["plugins"] = f"{plugins} code".strip()
        mce_attrs["toolbar"] = f"{toolbar} | code" if toolbar else "code"
    return mce_attrs


def get_config_variables():
    """(name, value) pairs of the editor configuration, for the report page."""
    rows = []
    for name, value in sorted(get_default_editor_settings().items()):
        rows.append((f"WYSIWYG_EDITOR_DEFAULTS[{name!r}]", value))
    rows.append(("TINYMCE_JS_URL", getattr(settings, "TINYMCE_JS_URL", "")))
    tinymce_config = getattr(settings, "TINYMCE_DEFAULT_CONFIG", {})
    for option in REPORTED_TINYMCE_OPTIONS:
        if option in tinymce_config:
            rows.append(
                (f"TINYMCE_DEFAULT_CONFIG[{option!r}]", tinymce_config[option])
            )
    return rows
