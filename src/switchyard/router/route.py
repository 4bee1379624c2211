from collections import namedtuple
from enum import Enum
from types import MappingProxyType
from urllib.parse import quote


SPLAT = '*'


class PatternError(ValueError):
    pass


class SegmentType(str, Enum):
    LITERAL = 'literal'
    PARAM = 'param'
    SPLAT = 'splat'


class MatchResult(namedtuple('MatchResult', 'target,params,not_found')):
    """Outcome of routing one request.

       `params` is a read-only mapping ordered like the pattern's
       segments, `not_found` is set when `target` is the router's
       fallback rather than a real match."""
    __slots__ = ()

    def __new__(cls, target, params=None, not_found=False):
        return super().__new__(
            cls, target, MappingProxyType(dict(params or {})), not_found)


class Route:
    __slots__ = ('pattern', 'path', 'segments', 'target')

    def __init__(self, pattern, target):
        self.pattern = pattern
        self.path = normalize(pattern)
        self.segments = parse(pattern)
        self.target = target

    def __repr__(self):
        return '<Route {}, {!r} {}>'.format(
            self.path, self.target, hex(id(self)))

    def describe(self):
        return self.path

    @property
    def has_splat(self):
        return bool(self.segments) and \
            self.segments[-1][0] is SegmentType.SPLAT

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented
        return self.path == other.path and self.target == other.target

    def __hash__(self):
        return hash(self.path)


def split_path(path):
    return [s for s in path.split('/') if s]


def normalize(pattern):
    return '/' + '/'.join(split_path(pattern))


def parse(pattern):
    names = set()
    result = []

    components = split_path(pattern)
    for idx, component in enumerate(components):
        if not component.startswith(':'):
            result.append((SegmentType.LITERAL, component))
            continue

        name = component[1:]
        if not name:
            raise PatternError(
                'Empty parameter name in pattern "{}"'.format(pattern))

        if name == SPLAT:
            if idx != len(components) - 1:
                raise PatternError(
                    'Splat ":*" must be the last segment in pattern "{}"'
                    .format(pattern))
            result.append((SegmentType.SPLAT, SPLAT))
            continue

        if name in names:
            raise PatternError(
                'Duplicate name "{}" in pattern "{}"'.format(name, pattern))
        names.add(name)
        result.append((SegmentType.PARAM, name))

    return tuple(result)


def build_path(route, params):
    """Fill `route`'s parameters from `params`.

       Returns the path and the names it consumed, or None when a
       parameter of the route is missing."""
    parts = []
    used = set()
    for typ, value in route.segments:
        if typ is SegmentType.LITERAL:
            parts.append(value)
            continue

        if value not in params:
            return None

        safe = '/' if typ is SegmentType.SPLAT else ''
        parts.append(quote(str(params[value]), safe=safe))
        used.add(value)

    return '/' + '/'.join(parts), used
