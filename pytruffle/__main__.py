#!/usr/bin/python3

import argparse
import json
import os
import sys
from dataclasses import asdict
from .config import config, DEFAULT_DOCUMENT
from .errors import ConfigError
from .loader import FORMATS, dump, dumps, load_file
from .utils import colors, fatal, notif

def make_parser():
    parser = argparse.ArgumentParser(prog="pytruffle")
    subparsers = parser.add_subparsers(dest='command')
    parser.add_argument('-c', '--config', type=str, default=None, metavar="<config file>",
                      help="JSON or YAML configuration file (default: " + config.config_file + " if present, else built-in)")

    subparsers.add_parser('networks', help='List the network profile names.')

    networkParser = subparsers.add_parser('network', help='Show one network profile.')
    networkParser.add_argument('name', nargs='?', default=config.network, metavar="<name>",
                      help="Network profile name (default: %(default)s)")

    compilerParser = subparsers.add_parser('compiler', help='Show one compiler version constraint.')
    compilerParser.add_argument('toolchain', nargs='?', default=config.toolchain, metavar="<toolchain>",
                      help="Compiler toolchain name (default: %(default)s)")

    dumpParser = subparsers.add_parser('dump', help='Write the configuration in canonical form.')
    dumpParser.add_argument('-f', '--format', type=str, choices=FORMATS, default=config.output_format, dest='fmt',
                      help="Output format when writing to stdout (default: %(default)s)")
    dumpParser.add_argument('-o', '--output', type=str, default=None, metavar='<output file>',
                      help='Output file, format taken from its extension (default: stdout)')
    return parser

def load_config(file_path=None):
    '''Loads `file_path`, else `config.config_file` from the working directory, else the built-in document'''
    if file_path is None:
        if not os.path.isfile(config.config_file):
            notif("Using built-in configuration")
            return DEFAULT_DOCUMENT
        file_path = config.config_file
    notif("Using configuration " + file_path)
    return load_file(file_path)

def main(args=None):
    parser = make_parser()
    args = parser.parse_args(args)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(2)

    try:
        document = load_config(args.config)

        if args.command == 'networks':
            for name in document.network_names():
                print(name)

        elif args.command == 'network':
            profile = document.get_network(args.name)
            print(json.dumps(asdict(profile), indent=2))

        elif args.command == 'compiler':
            spec = document.get_compiler_spec(args.toolchain)
            print(json.dumps(asdict(spec), indent=2))

        elif args.command == 'dump':
            if args.output is None:
                sys.stdout.write(dumps(document, args.fmt))
            else:
                dump(document, args.output)
                notif("Wrote " + args.output, colors.fg.green)
    except ConfigError as err:
        fatal(str(err))

if __name__ == '__main__':
    main()
