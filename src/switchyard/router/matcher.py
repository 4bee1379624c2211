from .route import SPLAT, SegmentType, normalize


class RouteTable:
    """Ordered, immutable list of routes for a single method.

       Every mutation returns a new table and leaves the receiver intact,
       so a table handed to a reader never changes under it. The first
       route whose pattern structurally matches the path wins; there is
       no specificity scoring."""
    __slots__ = ('_routes',)

    def __init__(self, routes=()):
        self._routes = tuple(routes)

    def __iter__(self):
        return iter(self._routes)

    def __len__(self):
        return len(self._routes)

    def __eq__(self, other):
        if not isinstance(other, RouteTable):
            return NotImplemented
        return self._routes == other._routes

    def __repr__(self):
        return '<RouteTable {} routes>'.format(len(self._routes))

    def add(self, route, priority=False):
        if priority:
            return type(self)((route,) + self._routes)

        return type(self)(self._routes + (route,))

    def remove_target(self, target):
        kept = tuple(r for r in self._routes if r.target != target)
        if len(kept) == len(self._routes):
            return self

        return type(self)(kept)

    def remove_path(self, pattern):
        path = normalize(pattern)
        kept = tuple(r for r in self._routes if r.path != path)
        if len(kept) == len(self._routes):
            return self

        return type(self)(kept)

    def match(self, segments):
        for route in self._routes:
            match_dict = match_segments(route, segments)
            if match_dict is not None:
                return route, match_dict

        return None


def match_segments(route, segments):
    pattern = route.segments
    if route.has_splat:
        if len(segments) < len(pattern):
            return None
    elif len(segments) != len(pattern):
        return None

    match_dict = {}
    for idx, (typ, data) in enumerate(pattern):
        if typ is SegmentType.LITERAL:
            if segments[idx] != data:
                return None
        elif typ is SegmentType.PARAM:
            match_dict[data] = segments[idx]
        elif typ is SegmentType.SPLAT:
            match_dict[SPLAT] = '/'.join(segments[idx:])
        else:
            assert 0, 'Unknown type'

    return match_dict
