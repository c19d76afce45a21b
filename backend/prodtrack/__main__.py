"""Development server entry point: ``python -m prodtrack``.

Disposes the database engine on SIGTERM/SIGINT before exiting.
"""
import logging
import os
import signal
import sys

from prodtrack import create_app
from prodtrack.db import get_database

logger = logging.getLogger('prodtrack')


def main():
    app = create_app()
    database = get_database(app)

    def _shutdown(signum, frame):
        logger.info('Received %s, shutting down', signal.Signals(signum).name)
        database.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)

    port = int(os.getenv('PORT', '3001'))
    logger.info('Starting prodtrack API on port %s (%s)', port, app.config['APP_ENV'])
    app.run(host=os.getenv('HOST', '0.0.0.0'), port=port, debug=app.config['APP_ENV'] == 'development',
            use_reloader=False)


if __name__ == '__main__':
    main()
