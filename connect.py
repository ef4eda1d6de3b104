#!/bin/env python3

import argparse
import logging


def configure_logger(verbose):
    date_format = '%Y.%m.%d:%H.%M.%S'
    format_string = '[%(asctime)s:%(levelname).1s:%(name)s]: %(message)s'
    formatter = logging.Formatter(format_string, datefmt=date_format)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger = logging.getLogger('')
    logger.setLevel(logging.DEBUG)
    logger.addHandler(console)
    return logger

def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument('-a', '--host', help='hostname', default='127.0.0.1')
    parser.add_argument('-p', '--port', help='use given port', type=int, required=True)
    parser.add_argument('-l', '--local-address', help='bind to given local address')
    parser.add_argument('-L', '--local-port', help='bind to given local port', type=int, default=0)
    parser.add_argument('-t', '--timeout', help='connect timeout in milliseconds', type=int)
    parser.add_argument('-c', '--config', help='read connection parameters from file')
    parser.add_argument('-v', '--verbose', help='print debug messages', action='store_true')
    return parser.parse_args()

def main():
    args = parse_args()
    configure_logger(args.verbose)
    from connlib import probe
    probe.main(args.host, args.port, args.local_address, args.local_port, args.timeout, args.config)

if __name__ == '__main__':
    main()
