# app.py
import logging
import sys

from flask import Flask, request

from config import ServerConfig, load_config
from lan import join_host_port, lan_url
from routes import register_routes
from routes.core import INDEX_TEMPLATE
from storage import FileStore

logger = logging.getLogger(__name__)


def create_app(config: ServerConfig = None) -> Flask:
    """Build the Flask app around an immutable config; creates the upload directory."""
    config = config or load_config()
    store = FileStore(config.upload_dir)
    store.ensure()

    app = Flask(__name__)
    app.config.update(
        SHARE=config,
        INDEX_HTML=INDEX_TEMPLATE.read_text(encoding="utf-8"),
        MAX_CONTENT_LENGTH=config.max_upload_size,
    )
    app.extensions["file_store"] = store

    @app.before_request
    def log_request():
        logger.info("%s %s %s", request.remote_addr, request.method, request.path)

    # register all blueprints
    register_routes(app)
    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    try:
        config = load_config()
    except ValueError as e:
        logger.critical("invalid configuration: %s", e)
        sys.exit(2)
    try:
        app = create_app(config)
    except OSError as e:
        logger.critical("cannot create shared folder %s: %s", config.upload_dir, e)
        sys.exit(1)

    logger.info("Shared folder: %s", config.upload_dir)
    logger.info("LAN address: %s", lan_url(config.port))
    logger.info("Local access: http://%s", join_host_port("localhost", config.port))
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
