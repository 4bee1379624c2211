import sys

from .runner import get_parser, verify, run


def main():
    parser = get_parser()
    args = parser.parse_args()

    router = verify(args)
    if router is None:
        return 1

    return run(router, args)


if __name__ == '__main__':
    sys.exit(main())
