"""Serves the About and Contact pages."""

import os

from flask import Flask, current_app, send_from_directory
from flask.typing import ResponseReturnValue

# the implicit /static/<path> route is disabled so only the pages below are served
app = Flask(__name__, static_folder=None)
app.config['PAGES_DIRECTORY'] = 'static'

# pages are served whatever the method; HEAD is added by Flask alongside GET
PAGE_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def send_page(filename: str) -> ResponseReturnValue:
  """Send a page from the pages directory.

  The directory is resolved against the working directory of the process
  rather than the package, and missing files become a 404.
  """
  directory = os.path.abspath(current_app.config['PAGES_DIRECTORY'])
  return send_from_directory(directory, filename)


@app.route('/about', methods=PAGE_METHODS)
def about_page() -> ResponseReturnValue:
  """Present the About page."""
  return send_page('about.html')


@app.route('/contact', methods=PAGE_METHODS)
def contact_page() -> ResponseReturnValue:
  """Present the Contact page."""
  return send_page('contact.html')


# the root path is served the About page directly, not redirected
app.add_url_rule('/', 'root', about_page, methods=PAGE_METHODS)
