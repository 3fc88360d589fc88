"""Main application module for Polymarket Times."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from flask import Flask
from flask_cors import CORS

from newsdesk import build_newsdesk
from newsdesk.refresh import RefreshJob
from newsdesk.settings import NewsdeskSettings

PROJECT_ROOT = Path(__file__).resolve().parent
TEMPLATE_DIR = PROJECT_ROOT / "templates"
PUBLIC_DIR = PROJECT_ROOT / "public"


def create_app(job: Optional[RefreshJob] = None, settings: Optional[NewsdeskSettings] = None) -> Flask:
    """Build the Flask app around a refresh job (and therefore its article store).

    The scheduler is not started here; see ``start_app.py``.
    """
    job = job or build_newsdesk(settings)

    # Static assets are served from the site root, e.g. /css/style.css
    app = Flask(
        __name__,
        template_folder=str(TEMPLATE_DIR),
        static_folder=str(PUBLIC_DIR),
        static_url_path="",
    )
    CORS(app)

    from web_routes import register_routes
    register_routes(app, job)
    return app
