"""
Browser-side scripts for each supported rich-text editor.

A dialect describes how one editor exposes its instances to page scripts.
Every script is a JavaScript function taking a single structured argument, so
instance ids, HTML fragments and command names are handed over by the browser
driver instead of being spliced into the script source.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorDialect:
    name: str
    # JS expression naming the global instance registry
    registry: str
    # () => string[]
    instance_ids: str
    # (id) => bool
    is_ready: str
    # ([id, html]) => void
    insert_html: str
    # (id) => string
    get_data: str
    # ([id, command, encodedData]) => string | null, JSON-encoded result
    exec_command: str

    def expression(self, instance_id):
        """Registry lookup expression for one instance, for log output."""
        return f'{self.registry}["{instance_id}"]'


CKEDITOR = EditorDialect(
    name="ckeditor",
    registry="CKEDITOR.instances",
    instance_ids="""
        () => (typeof CKEDITOR === 'undefined' ? [] : Object.keys(CKEDITOR.instances))
    """,
    is_ready="""
        (id) => typeof CKEDITOR !== 'undefined'
            && !!CKEDITOR.instances[id]
            && CKEDITOR.instances[id].status === 'ready'
    """,
    insert_html="""
        ([id, html]) => { CKEDITOR.instances[id].insertHtml(html); }
    """,
    get_data="""
        (id) => CKEDITOR.instances[id].getData()
    """,
    exec_command="""
        ([id, command, encoded]) => {
            const data = encoded === null ? undefined : JSON.parse(encoded);
            const result = CKEDITOR.instances[id].execCommand(command, data);
            return result === undefined ? null : JSON.stringify(result);
        }
    """,
)

TINYMCE = EditorDialect(
    name="tinymce",
    registry="tinymce.editors",
    instance_ids="""
        () => (typeof tinymce === 'undefined' ? [] : tinymce.get().map((editor) => editor.id))
    """,
    is_ready="""
        (id) => typeof tinymce !== 'undefined'
            && !!tinymce.get(id)
            && tinymce.get(id).initialized === true
    """,
    insert_html="""
        ([id, html]) => { tinymce.get(id).insertContent(html); }
    """,
    get_data="""
        (id) => tinymce.get(id).getContent()
    """,
    exec_command="""
        ([id, command, encoded]) => {
            const data = encoded === null ? undefined : JSON.parse(encoded);
            const result = tinymce.get(id).execCommand(command, false, data);
            return result === undefined ? null : JSON.stringify(result);
        }
    """,
)

DIALECTS = {dialect.name: dialect for dialect in (CKEDITOR, TINYMCE)}


def get_dialect(name):
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown editor dialect {name!r}, expected one of {sorted(DIALECTS)}"
        ) from None
