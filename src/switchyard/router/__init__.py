import logging
import threading
from collections import namedtuple
from types import MappingProxyType
from urllib.parse import urlencode

from .route import Route, MatchResult, PatternError, split_path, \
    build_path
from .matcher import RouteTable


logger = logging.getLogger(__name__)

METHODS = (
    'CONNECT', 'DELETE', 'GET', 'HEAD', 'OPTIONS',
    'PATCH', 'POST', 'PUT', 'TRACE')

ANY = '*'

_Snapshot = namedtuple('_Snapshot', 'tables,not_found_target,has_not_found')


def _check_method(method):
    upper = method.upper()
    if upper not in METHODS:
        raise ValueError('Unknown method "{}", expected one of {}'.format(
            method, ', '.join(METHODS)))

    return upper


class Router:
    """Method aware router over opaque targets.

       The whole routing state lives in one immutable snapshot. Readers
       take the snapshot once per call and never lock; writers build a
       replacement under `_lock` and publish it with a single assignment.

       Usage:
           router = Router() \\
               .get('/articles', 'index') \\
               .get('/articles/:id', 'show') \\
               .get_first('/articles/new', 'new') \\
               .not_found('404')

           result = router.route('GET', '/articles/123')
           result.target, dict(result.params)  # 'show', {'id': '123'}
    """

    def __init__(self, table_factory=RouteTable):
        self.table_factory = table_factory
        self._lock = threading.Lock()
        self._snapshot = _Snapshot(
            MappingProxyType({m: table_factory() for m in METHODS}),
            None, False)

    def _publish(self, tables=None, **changes):
        snapshot = self._snapshot
        if tables is not None:
            changes['tables'] = MappingProxyType(tables)
        self._snapshot = snapshot._replace(**changes)

    def add_route(self, method, pattern, target, priority=False):
        method = _check_method(method)
        route = Route(pattern, target)

        with self._lock:
            tables = dict(self._snapshot.tables)
            tables[method] = tables[method].add(route, priority=priority)
            self._publish(tables)

        logger.debug(
            'Registered %s %s -> %r%s', method, route.path, target,
            ' (first)' if priority else '')

        return self

    def add_any(self, pattern, target):
        route = Route(pattern, target)

        with self._lock:
            tables = {
                m: t.add(route) for m, t in self._snapshot.tables.items()}
            self._publish(tables)

        logger.debug('Registered %s %s -> %r', ANY, route.path, target)

        return self

    def not_found(self, target):
        with self._lock:
            self._publish(not_found_target=target, has_not_found=True)

        logger.debug('Not found target set to %r', target)

        return self

    def remove_target(self, target):
        with self._lock:
            tables = {
                m: t.remove_target(target)
                for m, t in self._snapshot.tables.items()}
            self._publish(tables)

        logger.debug('Removed routes targeting %r', target)

    def remove_path(self, pattern):
        with self._lock:
            tables = {
                m: t.remove_path(pattern)
                for m, t in self._snapshot.tables.items()}
            self._publish(tables)

        logger.debug('Removed routes for %s', pattern)

    def route(self, method, path):
        snapshot = self._snapshot

        table = snapshot.tables.get(method.upper())
        if table is not None:
            match = table.match(split_path(path))
            if match is not None:
                route, match_dict = match
                return MatchResult(route.target, match_dict)

        if snapshot.has_not_found:
            return MatchResult(snapshot.not_found_target, not_found=True)

        return None

    def allowed_methods(self, path):
        segments = split_path(path)
        return frozenset(
            m for m, t in self._snapshot.tables.items()
            if t.match(segments) is not None)

    def path(self, target, params=None):
        """Build a path that routes to `target`.

           Among the routes for `target` whose parameters can all be
           filled from `params`, the one consuming the most of them wins.
           Leftover params become the query string."""
        params = dict(params or {})
        best = None
        for _, route in self.routes():
            if route.target != target:
                continue

            built = build_path(route, params)
            if built is not None and (
                    best is None or len(built[1]) > len(best[1])):
                best = built

        if best is None:
            return None

        path, used = best
        query = [(k, v) for k, v in params.items() if k not in used]
        if query:
            path += '?' + urlencode(query, doseq=True)

        return path

    def routes(self, method=None):
        tables = self._snapshot.tables
        methods = [_check_method(method)] if method else METHODS

        return [(m, r) for m in methods for r in tables[m]]

    def __str__(self):
        snapshot = self._snapshot
        rows = [
            (m, r.describe(), repr(r.target))
            for m in METHODS for r in snapshot.tables[m]]
        if snapshot.has_not_found:
            rows.append((ANY, ANY, repr(snapshot.not_found_target)))
        if not rows:
            return ''

        widths = [max(len(row[i]) for row in rows) for i in range(2)]

        return '\n'.join(
            '{:<{}}  {:<{}}  {}'.format(m, widths[0], p, widths[1], t)
            for m, p, t in rows)

    def connect(self, pattern, target):
        """Add CONNECT route."""
        return self.add_route('CONNECT', pattern, target)

    def connect_first(self, pattern, target):
        """Add CONNECT route ahead of existing ones."""
        return self.add_route('CONNECT', pattern, target, priority=True)

    def delete(self, pattern, target):
        """Add DELETE route."""
        return self.add_route('DELETE', pattern, target)

    def delete_first(self, pattern, target):
        """Add DELETE route ahead of existing ones."""
        return self.add_route('DELETE', pattern, target, priority=True)

    def get(self, pattern, target):
        """Add GET route."""
        return self.add_route('GET', pattern, target)

    def get_first(self, pattern, target):
        """Add GET route ahead of existing ones."""
        return self.add_route('GET', pattern, target, priority=True)

    def head(self, pattern, target):
        """Add HEAD route."""
        return self.add_route('HEAD', pattern, target)

    def head_first(self, pattern, target):
        """Add HEAD route ahead of existing ones."""
        return self.add_route('HEAD', pattern, target, priority=True)

    def options(self, pattern, target):
        """Add OPTIONS route."""
        return self.add_route('OPTIONS', pattern, target)

    def options_first(self, pattern, target):
        """Add OPTIONS route ahead of existing ones."""
        return self.add_route('OPTIONS', pattern, target, priority=True)

    def patch(self, pattern, target):
        """Add PATCH route."""
        return self.add_route('PATCH', pattern, target)

    def patch_first(self, pattern, target):
        """Add PATCH route ahead of existing ones."""
        return self.add_route('PATCH', pattern, target, priority=True)

    def post(self, pattern, target):
        """Add POST route."""
        return self.add_route('POST', pattern, target)

    def post_first(self, pattern, target):
        """Add POST route ahead of existing ones."""
        return self.add_route('POST', pattern, target, priority=True)

    def put(self, pattern, target):
        """Add PUT route."""
        return self.add_route('PUT', pattern, target)

    def put_first(self, pattern, target):
        """Add PUT route ahead of existing ones."""
        return self.add_route('PUT', pattern, target, priority=True)

    def trace(self, pattern, target):
        """Add TRACE route."""
        return self.add_route('TRACE', pattern, target)

    def trace_first(self, pattern, target):
        """Add TRACE route ahead of existing ones."""
        return self.add_route('TRACE', pattern, target, priority=True)


__all__ = [
    'ANY', 'METHODS', 'MatchResult', 'PatternError', 'Route', 'RouteTable',
    'Router']
