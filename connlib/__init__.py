from .socket_factory import SocketFactory
from .plain_socket_factory import PlainSocketFactory, get_socket_factory
from .params import ConnectionParams, get_connection_timeout, set_connection_timeout, read_params
