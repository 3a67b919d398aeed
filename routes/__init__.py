# routes/__init__.py
from .core import bp as core_bp
from .files import bp as files_bp

def register_routes(app):
    app.register_blueprint(core_bp)
    app.register_blueprint(files_bp)
