import logging
import os

from dotenv import load_dotenv

load_dotenv(os.getenv('NEWSDESK_DOTENV', '.env'))

from app import create_app
from app_utils import configure_logging, get_env
from newsdesk import build_newsdesk
from newsdesk.scheduler import build_scheduler
from newsdesk.settings import load_settings
from utils.config import get_int_env

logger = logging.getLogger("polymarket_times")


def main():
    settings = load_settings()
    configure_logging(settings.log_dir)

    host = get_env('HOST', '0.0.0.0')
    port = get_int_env('PORT', 3000)
    debug = get_env('DEBUG', 'False').lower() == 'true'

    job = build_newsdesk(settings)
    app = create_app(job)

    scheduler = build_scheduler(job, settings)
    scheduler.start()

    logger.info("Polymarket Times running on http://localhost:%s", port)
    try:
        # The reloader would start a second scheduler in the child process
        app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)
    finally:
        scheduler.shutdown(wait=False)


if __name__ == '__main__':
    main()
