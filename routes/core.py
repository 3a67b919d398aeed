# routes/core.py
import logging
from pathlib import Path

from flask import Blueprint, Response, current_app, render_template_string
from jinja2 import TemplateError
from werkzeug.exceptions import HTTPException

from lan import lan_url

logger = logging.getLogger(__name__)

bp = Blueprint("core", __name__)

# shipped as package data next to this module
INDEX_TEMPLATE = Path(__file__).resolve().parent / "HTML" / "Index.html"


def plain_error(message: str, status: int) -> Response:
    """Short plain-text error body; details belong in the log, not here."""
    return Response(message + "\n", status=status, mimetype="text/plain")


@bp.app_errorhandler(HTTPException)
def http_error(e: HTTPException):
    messages = {
        404: "Not found",
        405: "Method not allowed",
        413: "Upload too large",
    }
    code = e.code or 500
    resp = plain_error(messages.get(code, e.name), code)
    # keep Allow / Content-Range etc. that werkzeug attached
    for key, value in e.get_headers():
        if key.lower() != "content-type":
            resp.headers[key] = value
    return resp


@bp.get("/")
def index():
    cfg = current_app.config["SHARE"]
    store = current_app.extensions["file_store"]
    try:
        files = store.list_files()
    except OSError:
        logger.exception("listing %s failed", store.root)
        return plain_error("Failed to read file list", 500)
    try:
        return render_template_string(
            current_app.config["INDEX_HTML"],
            app_title=cfg.title,
            folder_name=cfg.folder_name,
            lan_url=lan_url(cfg.port),
            files=files,
        )
    except TemplateError:
        logger.exception("rendering index failed")
        return plain_error("Render error", 500)
