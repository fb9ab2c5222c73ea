"""Pages server.

This is the main entry point script, serving the About and Contact pages
on 0.0.0.0:8080 until the process is terminated.
"""

import logging
import socket
import sys

from werkzeug.serving import BaseWSGIServer, make_server, select_address_family

import web
from config import Config
from src.logs import setup_logger

logger = logging.getLogger('pages')


def create_server(config: Config) -> BaseWSGIServer:
  """Bind the listening socket and wrap it in a threaded WSGI server.

  Each request is handled on its own thread by Werkzeug.

  Args:
      config (Config): supplies the host and port to bind

  Raises:
      OSError: if the address cannot be bound, e.g. the port is in use

  Returns:
      BaseWSGIServer: a server that is listening but not yet serving
  """
  # bind here so a failure raises, rather than Werkzeug printing and exiting itself
  family = select_address_family(config.host, config.port)
  with socket.create_server((config.host, config.port), family=family) as sock:
    return make_server(config.host, config.port, web.app, threaded=True, fd=sock.fileno())


def serve(config: Config) -> None:
  """Serve the pages until the process is terminated.

  A failure to bind is fatal: it is logged and the process exits with
  status 1, without retrying or trying another port.

  Args:
      config (Config): the settings to serve with
  """
  setup_logger(config)

  web.app.config['PAGES_DIRECTORY'] = config.static_directory

  try:
    server = create_server(config)
  except OSError as e:
    logger.critical('Unable to listen on %s: %s', config.bind_address(), e)
    sys.exit(1)

  host, port = server.server_address[:2]
  logger.info('Serving pages from ./%s at http://%s:%i/', config.static_directory, host, port)
  server.serve_forever()


def main() -> None:
  """Serve the pages using the built-in settings."""
  serve(Config())


if __name__ == '__main__':
  main()
