import sys
import socket
import logging
from connlib.params import ConnectionParams, read_params, set_connection_timeout
from connlib.plain_socket_factory import get_socket_factory


def make_connection(factory, host, port, local_address, local_port, params):
    try:
        return factory.connect_socket(None, host, port, local_address, local_port, params)
    except socket.timeout:
        print('Connection timed out')
        sys.exit(1)
    except OSError as err:
        print('Connection error: {}'.format(err))
        sys.exit(1)


def create_params(config, timeout):
    if config:
        try:
            params = read_params(config)
        except RuntimeError as exc:
            print('Error: {}'.format(exc))
            sys.exit(1)
    else:
        params = ConnectionParams()
    if timeout is not None:
        set_connection_timeout(params, timeout)
    return params


def main(host, port, local_address=None, local_port=0, timeout=None, config=None):
    logger = logging.getLogger(__name__)
    params = create_params(config, timeout)
    sock = make_connection(get_socket_factory(), host, port, local_address, local_port, params)
    logger.info('Connected to {}:{}'.format(host, port))
    try:
        print('Connected {} -> {}'.format(sock.getsockname(), sock.getpeername()))
    finally:
        sock.close()
