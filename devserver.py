"""Local development server that answers unknown paths with the 404 page."""

# Standard modules
import functools
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler
import logging
import os
import socketserver

logger = logging.getLogger(__name__)

NOT_FOUND_PAGE = '404.html'
NOT_FOUND_CONTENT_TYPE = 'text/html; charset=UTF-8'


class MissingNotFoundPage(Exception):
  """The built site has no 404 page to fall back on."""


def not_found_path(root):
  return os.path.join(root, NOT_FOUND_PAGE)


def check_not_found_page(root):
  path = not_found_path(root)
  if not os.path.isfile(path):
    raise MissingNotFoundPage(
        'Expected a `{}` file but could not find one. '
        'Did you create a 404.html template?'.format(path))
  return path


class NotFoundRequestHandler(SimpleHTTPRequestHandler):
  """Serves the site, sending the 404 page for anything it cannot find."""

  def send_error(self, code, message=None, explain=None):
    if code != HTTPStatus.NOT_FOUND:
      return super().send_error(code, message, explain)
    # Read on every request so a regenerated page is picked up.
    with open(not_found_path(self.directory), 'rb') as page:
      content = page.read()
    self.send_response(HTTPStatus.NOT_FOUND)
    self.send_header('Content-Type', NOT_FOUND_CONTENT_TYPE)
    self.send_header('Content-Length', str(len(content)))
    self.end_headers()
    if self.command != 'HEAD':
      self.wfile.write(content)

  def log_message(self, format, *args):
    logger.info('%s - %s', self.address_string(), format % args)


class AddressReuseTCPServer(socketserver.TCPServer):
  allow_reuse_address = True


def make_server(root, host='127.0.0.1', port=8000):
  """Returns a server for the site in `root`, after checking its 404 page."""
  check_not_found_page(root)
  handler = functools.partial(
      NotFoundRequestHandler, directory=os.path.abspath(root))
  return AddressReuseTCPServer((host, port), handler)
