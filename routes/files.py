# routes/files.py
import logging
import mimetypes
import os
import unicodedata
from urllib.parse import quote

from flask import Blueprint, abort, current_app, redirect, request, url_for
from werkzeug.exceptions import HTTPException
from werkzeug.wsgi import wrap_file

from storage import EPOCH
from utils import sanitize_filename
from .core import plain_error

logger = logging.getLogger(__name__)

bp = Blueprint("files", __name__)


# send_from_directory would emit an unquoted filename= for token-safe names;
# downloads always carry the quoted form.
def content_disposition(name: str) -> str:
    """attachment header with a quoted ASCII filename plus filename* for non-ASCII names."""
    try:
        name.encode("ascii")
    except UnicodeEncodeError:
        fallback = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
        fallback = fallback.replace("\\", "\\\\").replace('"', '\\"') or "download"
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(name, safe='')}"
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'attachment; filename="{escaped}"'


@bp.post("/upload")
def upload():
    store = current_app.extensions["file_store"]
    # werkzeug enforces MAX_CONTENT_LENGTH here (413) and parses malformed bodies as empty
    incoming = request.files.get("file")
    if incoming is None:
        return plain_error("No file selected", 400)

    name = sanitize_filename(incoming.filename)
    if not name:
        return plain_error("Invalid file name", 400)

    try:
        size = store.create_or_replace(name, incoming.stream)
    except OSError:
        logger.exception("saving %s failed", name)
        return plain_error("Failed to save file", 500)
    finally:
        incoming.close()

    logger.info("received file %s (%d bytes) from %s", name, size, request.remote_addr)
    return redirect(url_for("core.index"), code=303)


@bp.get("/files/<path:name>")
def download(name: str):
    store = current_app.extensions["file_store"]
    safe = sanitize_filename(name)
    if not safe:
        abort(404)
    try:
        fh = store.open_for_read(safe)
    except OSError:
        abort(404)

    try:
        size = fh.seek(0, os.SEEK_END)
        fh.seek(0)
        mtime = store.stat_mod_time(fh)

        # built by hand: send_file drops range support for a bare file object
        rv = current_app.response_class(
            wrap_file(request.environ, fh),
            mimetype=mimetypes.guess_type(safe)[0] or "application/octet-stream",
            direct_passthrough=True,
        )
        rv.headers["Content-Disposition"] = content_disposition(safe)
        rv.content_length = size
        rv.accept_ranges = "bytes"
        if mtime > EPOCH:
            rv.last_modified = mtime
        rv.cache_control.no_cache = True
        # If-Modified-Since / If-Range / Range handling
        return rv.make_conditional(request.environ, accept_ranges=True, complete_length=size)
    except (OSError, HTTPException):
        fh.close()
        raise
