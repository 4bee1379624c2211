from .router import Router, RouteTable, Route, MatchResult, PatternError, \
    METHODS, ANY
from .frontend import RoutingHandler, Routed

__version__ = '0.1.0'
