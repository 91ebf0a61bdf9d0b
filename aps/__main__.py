import sys

from aps.utils.deps import check_deps


def main(argv=None):
    check_deps()
    # rich/requests are only safe to import once the check passed
    from aps.cli import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
