import logging
import urllib.parse


logger = logging.getLogger(__name__)


class Routed(object):
    __slots__ = (
        'target', 'not_found', 'method', 'path', 'path_params',
        'query_params')

    def __init__(self, target, not_found, method, path, path_params,
                 query_params):
        self.target = target
        self.not_found = not_found
        self.method = method
        self.path = path
        self.path_params = path_params
        self.query_params = query_params

    def __repr__(self):
        return '<Routed {0.method} {0.path} -> {0.target!r}{1}>' \
            .format(self, ' (not found)' if self.not_found else '')


def expects_continue(headers):
    if not headers:
        return False

    for name, value in headers.items():
        if name.lower() == 'expect':
            return value.strip().lower() == '100-continue'

    return False


def split_uri(uri):
    parts = urllib.parse.urlsplit(uri)
    path = urllib.parse.unquote(parts.path)
    query = urllib.parse.parse_qs(parts.query, keep_blank_values=True)

    return path, query


class RoutingHandler:
    """Glue between an HTTP front end and a `Router`.

       The front end parses requests and writes responses, this class
       only decides where a request goes. One instance is safe to share
       between all connections."""

    def __init__(self, router):
        if router is None:
            raise TypeError('router must not be None')

        self.router = router

    expects_continue = staticmethod(expects_continue)

    def dispatch(self, method, uri):
        path, query = split_uri(uri)
        result = self.router.route(method, path)
        if result is None:
            logger.debug('No route for %s %s', method, path)
            return None

        return Routed(
            result.target, result.not_found, method.upper(), path,
            result.params, query)
