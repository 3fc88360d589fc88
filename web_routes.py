"""Web routes for Polymarket Times."""
from __future__ import annotations

import logging

from flask import jsonify, redirect, render_template, url_for

from app_utils import format_timestamp, format_volume
from newsdesk.refresh import RefreshJob
from newsdesk.status import build_status

logger = logging.getLogger("polymarket_times")

RECENT_COUNT = 5


def register_routes(app, job: RefreshJob):
    """Register all routes with the Flask app.
    
    Args:
        app: Flask app instance.
        job: RefreshJob whose store the views read from.
    """
    store = job.store

    app.add_template_filter(format_volume, "format_volume")
    app.add_template_filter(format_timestamp, "format_timestamp")

    @app.route("/")
    def index():
        """Homepage: featured article plus the next few."""
        articles = list(store.snapshot())
        return render_template(
            "index.html",
            articles=articles,
            featured=articles[0] if articles else None,
            recent=articles[1:1 + RECENT_COUNT],
        )

    @app.route("/article/<article_id>")
    def article_detail(article_id):
        """Article page; unknown ids go back to the homepage."""
        article = store.find(article_id)
        if article is None:
            logger.info("Article %s not found; redirecting to homepage", article_id)
            return redirect(url_for("index"))
        return render_template("article.html", article=article)

    @app.route("/api/status")
    def api_status():
        """Read-only status of the store, the generator and the market source."""
        return jsonify(build_status(job))
