import click
from werkzeug.serving import run_simple

from receipt_api import create_app
from receipt_api.config import Config


@click.command()
@click.option("--host", default=Config.HOST, show_default=True, help="interface of API server")
@click.option("--port", default=Config.PORT, show_default=True, type=int, help="port of API server")
def main(host, port):
    app = create_app()
    app.logger.info("starting receipt API server on %s:%d", host, port)
    try:
        # one thread per request; the receipt store is shared between them
        run_simple(host, port, app, threaded=True)
    finally:
        app.logger.info("shutting down receipt API server")


if __name__ == "__main__":
    main()
