import argparse
import json
import sys
from typing import Any
from . import locator
from .bootstrap import boot, shutdown
from .exceptions import DrushError
UNAVAILABLE = 'unavailable'

def collect_status() -> dict[str, Any]:
    config = locator.config()
    version = locator.service('version')
    cache = config.cache() or UNAVAILABLE
    return {'drush-version': version.get_version(), 'cwd': config.cwd(), 'home': config.home(), 'user': config.user(), 'tmp': config.tmp(), 'os': 'Windows' if config.is_windows() else 'POSIX', 'cache': cache}

def _print_text(status: dict[str, Any]) -> None:
    width = max((len(key) for key in status))
    for key, value in status.items():
        print(f'{key.ljust(width)} : {value}')

def main(argv: list[str] | None=None) -> int:
    parser = argparse.ArgumentParser(prog='drush-core', description='Drush runtime information.')
    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('version', help='Print the Drush version.')
    status_parser = subparsers.add_parser('status', help='Print environment and cache information.')
    status_parser.add_argument('--json', action='store_true', help='Print raw JSON output.')
    args = parser.parse_args(argv)
    try:
        boot()
        if args.command == 'version':
            print(locator.service('version').get_version())
            return 0
        status = collect_status()
    except DrushError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1
    finally:
        shutdown()
    if args.json:
        print(json.dumps(status, ensure_ascii=False, indent=2))
    else:
        _print_text(status)
    return 0
if __name__ == '__main__':
    raise SystemExit(main())
