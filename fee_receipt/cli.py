"""Command line entry point: render a receipt from JSON or search the store."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import get_settings
from .emitter import render_to_bytes
from .errors import ReceiptError
from .forms import complete_record, validate_totals
from .models import ReceiptRecord
from .store import ReceiptStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fee-receipt', description='Generate and find fee receipts')
    parser.add_argument('--out', help='receipt directory (default: RECEIPT_OUTPUT_DIR or ./pdfs)')
    # accepted after the subcommand too; SUPPRESS keeps a leading --out from being reset
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--out', default=argparse.SUPPRESS,
                        help='receipt directory (default: RECEIPT_OUTPUT_DIR or ./pdfs)')
    sub = parser.add_subparsers(dest='command', required=True)

    render = sub.add_parser('render', parents=[common], help='render a receipt from a JSON record')
    render.add_argument('record', help='path to the record JSON, or - for stdin')
    render.add_argument('--fill-words', action='store_true',
                        help='derive amount in words and denomination amounts')
    render.add_argument('--strict', action='store_true',
                        help='refuse records whose fee and denomination sums differ from the total')

    search = sub.add_parser('search', parents=[common], help='list stored receipts')
    search.add_argument('name', nargs='?', help='case-insensitive part of the student name')

    fetch = sub.add_parser('fetch', parents=[common], help='locate or copy a stored receipt')
    fetch.add_argument('filename', help='stored file name, as printed by render or search')
    fetch.add_argument('--to', help='copy the PDF to this path instead of printing its location')
    return parser


def _load_record(source: str) -> ReceiptRecord:
    if source == '-':
        payload = json.load(sys.stdin)
    else:
        payload = json.loads(Path(source).read_text(encoding='utf-8'))
    return ReceiptRecord.from_dict(payload)


def cmd_render(args, store: ReceiptStore, settings) -> int:
    record = _load_record(args.record)
    if args.fill_words:
        record = complete_record(record)
    if args.strict:
        validate_totals(record)
    data = render_to_bytes(record, settings.style())
    stored = store.save(record, data)
    print(stored.filename)
    return 0


def cmd_search(args, store: ReceiptStore, settings) -> int:
    print(json.dumps(store.search(args.name), indent=2))
    return 0


def cmd_fetch(args, store: ReceiptStore, settings) -> int:
    if args.to:
        target = Path(args.to)
        target.write_bytes(store.read(args.filename))
        logger.info('Copied receipt %s to %s', args.filename, target)
        print(target)
    else:
        print(store.path_for(args.filename))
    return 0


COMMANDS = {
    'render': cmd_render,
    'search': cmd_search,
    'fetch': cmd_fetch,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    store = ReceiptStore(args.out or settings.output_dir)
    handler = COMMANDS[args.command]
    try:
        return handler(args, store, settings)
    except ReceiptError as exc:
        logger.error('%s', exc)
        print(f'error: {exc}', file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1
