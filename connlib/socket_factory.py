#!/bin/env python3

from abc import ABC, abstractmethod


class SocketFactory(ABC):
    """
    Creates and connects client sockets.

    Variants differ only in how the connection is established (plain,
    TLS-wrapped, proxied); callers hold a SocketFactory and never the
    concrete class.
    """

    @abstractmethod
    def create_socket(self):
        """
        Create a new, unconnected socket.

        Returns:
            socket.socket: the new socket.
        """
        pass

    @abstractmethod
    def connect_socket(self, sock, host, port, local_address, local_port, params):
        """
        Connect a socket to the given target.

        Args:
            sock: the socket to connect, or None to create a new one.
            host: hostname or IP address of the target.
            port: port of the target.
            local_address: local address to bind to, or None for any.
            local_port: local port to bind to; 0 or less means any.
            params: connection parameters the connect timeout is read from.

        Returns:
            socket.socket: the connected socket.
        """
        pass
