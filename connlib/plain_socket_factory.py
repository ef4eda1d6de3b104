#!/bin/env python3

import socket
import logging
import threading
from .socket_factory import SocketFactory
from .params import get_connection_timeout


class PlainSocketFactory(SocketFactory):
    """
    The default factory for plain, unencrypted sockets.

    There is only one instance per process; get it with get_socket_factory().
    It holds no mutable state, so it can be shared between threads freely.
    Sockets it creates itself take the family of the resolved target.

    A socket created inside connect_socket() is handed to the caller only on
    success. If binding or connecting fails, that socket is not closed here;
    cleaning it up is up to the caller.
    """

    __instance = None
    __lock = threading.Lock()
    logger = logging.getLogger('PlainSocketFactory')

    def __new__(cls):
        with cls.__lock:
            if cls.__instance is None:
                cls.__instance = super().__new__(cls)
                cls.logger.debug('Constructor')
        return cls.__instance

    def create_socket(self):
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM)

    def connect_socket(self, sock, host, port, local_address, local_port, params):
        if host is None:
            raise ValueError('Target host may not be None.')
        if params is None:
            raise ValueError('Parameters may not be None.')

        # resolve the target hostname first
        family = sock.family if sock is not None else socket.AF_UNSPEC
        try:
            addresses = socket.getaddrinfo(host, port, family, socket.SOCK_STREAM)
        except UnicodeError as exc:
            raise socket.gaierror(socket.EAI_NONAME, 'Invalid hostname {!r}: {}'.format(host, exc)) from exc
        family, _, _, _, target = addresses[0]

        if sock is None:
            if family == socket.AF_INET:
                sock = self.create_socket()
            else:
                sock = socket.socket(family, socket.SOCK_STREAM)

        if local_address is not None or local_port > 0:
            if local_port < 0:
                local_port = 0  # any
            address = str(local_address) if local_address is not None else ''
            self.logger.debug('Binding to {}:{}'.format(address, local_port))
            sock.bind((address, local_port))

        timeout = get_connection_timeout(params)
        if timeout < 0:
            raise ValueError('Connection timeout may not be negative.')
        self.logger.debug('Connecting to {}:{} at {} with timeout {} ms'.format(host, port, target, timeout))
        previous_timeout = sock.gettimeout()
        sock.settimeout(timeout / 1000 if timeout else None)
        try:
            sock.connect(target)
        finally:
            sock.settimeout(previous_timeout)
        return sock

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(PlainSocketFactory)


def get_socket_factory():
    return PlainSocketFactory()
