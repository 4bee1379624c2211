from argparse import ArgumentParser
from importlib import import_module
import sys

from .router import Router


def get_parser():
    prog = 'python -m switchyard' if sys.argv[0].endswith('__main__.py') \
        else 'switchyard'
    parser = ArgumentParser(prog=prog)
    parser.add_argument(
        '--route', dest='route', nargs=2, metavar=('METHOD', 'PATH'),
        help='route a single request instead of printing the table')

    parser.add_argument('router')

    return parser


def verify(args):
    try:
        module, attribute = args.router.rsplit('.', 1)
    except ValueError:
        print(
            "Router specifier must contain at least one '.', " +
            "got '{}'.".format(args.router))
        return None

    try:
        module = import_module(module)
    except ModuleNotFoundError as e:
        print(e.args[0] + ' on Python search path.')
        return None

    try:
        attribute = getattr(module, attribute)
    except AttributeError:
        print(
            "Module '{}' does not have an attribute '{}'."
            .format(module.__name__, attribute))
        return None

    if not isinstance(attribute, Router):
        print("{} is not an instance of 'switchyard.Router'.".format(
            args.router))
        return None

    return attribute


def run(router, args):
    if not args.route:
        print(router)
        return 0

    method, path = args.route
    result = router.route(method, path)
    if result is None:
        print('No route for {} {}'.format(method.upper(), path))
        return 1

    print('target:    {!r}'.format(result.target))
    print('params:    {}'.format(dict(result.params)))
    print('not found: {}'.format(result.not_found))

    return 0
