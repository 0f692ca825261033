#!/usr/bin/env python3
'''
Compare the messages of two PO/POT catalogs and list the
messages that were added or deleted.

Examples:

    %(prog)s lang/po/messages.pot new.pot
    %(prog)s -j diff.json old.pot new.pot
'''
import argparse
import json
import logging
import os.path
import shutil
import sys

from logging.config import dictConfig

from po_catalog import ParserOptions, PoError, iter_file, parse_stream

LOGGING_CONFIG = {
    'formatters': {
        'standard': {'format': '%(levelname)s %(funcName)s: %(message)s'},
    },
    'handlers': {
        'default': {
            'level': 'NOTSET',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        '': {
            'handlers': ['default'],
            'level': 'WARNING',
        },
    },
    'disable_existing_loggers': False,
    'version': 1,
}

log = logging.getLogger(__name__)


class bcolors:
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    ENDC = '\033[0m'


def print_color(text, color):
    for s in text.split("\n"):
        if not s:
            print()
        else:
            print(f"{color}{s}{bcolors.ENDC}")


def read_all_messages(path, options=None):
    if not os.path.isfile(path):
        raise PoError("cannot read {}".format(path))
    with open(path, "rb") as fp:
        table = parse_stream(iter_file(fp), options)
    messages = set()
    for entry in table.entries():
        ctxt = entry.msgctxt or ""
        messages.add((entry.msgid, ctxt))
        if entry.msgid_plural:
            messages.add((entry.msgid_plural, ctxt))
    log.info("read %d message(s) from %s", len(messages), path)
    return messages


def compare_po(old_pot_path, new_pot_path, options=None):
    print(f"Reading '{old_pot_path}'...")
    old_messages = read_all_messages(old_pot_path, options)
    print(f"  Read {len(old_messages)} message(s)")
    print()

    print(f"Reading '{new_pot_path}'...")
    new_messages = read_all_messages(new_pot_path, options)
    print(f"  Read {len(new_messages)} message(s)")
    print()

    print("Computing differences...")
    deleted_messages = list(sorted(old_messages - new_messages))
    added_messages = list(sorted(new_messages - old_messages))
    print()
    return (deleted_messages, added_messages)


def output_to_screen(deleted_messages, added_messages):
    columns = shutil.get_terminal_size((80, 24)).columns
    delim = "-" * columns

    if len(deleted_messages) == 0:
        print("No message deleted.")
    else:
        print(f"{len(deleted_messages)} message(s) deleted:")
        for msg, ctxt in deleted_messages:
            print_color(delim, bcolors.OKCYAN)
            print_color(f"[{ctxt}] {msg}" if ctxt else msg, bcolors.OKCYAN)
        print_color(delim, bcolors.OKCYAN)
    print()

    if len(added_messages) == 0:
        print("No message added.")
    else:
        print(f"{len(added_messages)} message(s) added:")
        for msg, ctxt in added_messages:
            print_color(delim, bcolors.OKGREEN)
            print_color(f"[{ctxt}] {msg}" if ctxt else msg, bcolors.OKGREEN)
        print_color(delim, bcolors.OKGREEN)


def output_to_json(path, deleted_messages, added_messages):
    result = {
        "deleted": sorted(set([msg for msg, ctxt in deleted_messages])),
        "added": sorted(set([msg for msg, ctxt in added_messages]))
    }
    with open(path, "w", encoding="utf-8") as fp:
        fp.write(json.dumps(result))
    print(f"Comparison result written to '{path}'\n")


def main(argv=None):
    arg_parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    arg_parser.add_argument('old_pot', help='Old catalog')
    arg_parser.add_argument('new_pot', help='New catalog')
    arg_parser.add_argument(
        '-j', '--json-output', dest='output_file',
        help='Write result in structured JSON format to file')
    arg_parser.add_argument(
        '--charset', dest='charset', default='iso-8859-1',
        help='Charset used when a catalog does not declare one')
    arg_parser.add_argument(
        '--loglevel', dest='loglevel',
        choices=['INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help="set verbosity level")
    args = arg_parser.parse_args(argv)

    dictConfig(LOGGING_CONFIG)
    logging.getLogger().setLevel(getattr(logging, args.loglevel))

    options = ParserOptions(default_charset=args.charset)
    try:
        (deleted_messages, added_messages) = compare_po(
            args.old_pot, args.new_pot, options)
    except PoError as err:
        log.error("%s", err)
        return 1
    if args.output_file:
        output_to_json(args.output_file, deleted_messages, added_messages)
    output_to_screen(deleted_messages, added_messages)
    return 0


if __name__ == '__main__':
    sys.exit(main())
