from urllib.parse import quote

from starlette.responses import Response

from vibespecs.core.logging import log
from vibespecs.models import PRDDocument
from vibespecs.rendering import MARKDOWN_MEDIA_TYPE, export_filename, render_markdown


def markdown_attachment(document: PRDDocument) -> Response:
    """Downloadable markdown export of a document."""
    filename = export_filename(document.app_name)
    # Plain filename for old clients, RFC 5987 form for non-ASCII names
    ascii_name = filename.encode("ascii", "replace").decode("ascii").replace('"', "")
    disposition = f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
    log("RENDER", f"Markdown export {filename}")
    return Response(
        content=render_markdown(document),
        media_type=MARKDOWN_MEDIA_TYPE,
        headers={"Content-Disposition": disposition},
    )
