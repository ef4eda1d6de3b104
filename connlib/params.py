#!/bin/env python3

import logging
from google.protobuf import json_format
from google.protobuf.struct_pb2 import Struct
from google.protobuf.text_format import MessageToString

CONNECTION_TIMEOUT = 'http.connection.timeout'


class ConnectionParams:

    parameters = None
    logger = None

    def __init__(self, parameters=None):
        self.parameters = dict(parameters or {})
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.debug('Constructor')

    def get_parameter(self, name):
        return self.parameters.get(name)

    def set_parameter(self, name, value):
        self.parameters[name] = value
        return self

    def get_int_parameter(self, name, default):
        value = self.get_parameter(name)
        if value is None:
            return default
        return int(value)

    def is_parameter_set(self, name):
        return self.get_parameter(name) is not None

    def remove_parameter(self, name):
        return self.parameters.pop(name, None) is not None


def get_connection_timeout(params):
    """
    Timeout in milliseconds for establishing a connection; 0 means no timeout.
    """
    if params is None:
        raise ValueError('Parameters may not be None.')
    return params.get_int_parameter(CONNECTION_TIMEOUT, 0)


def set_connection_timeout(params, timeout):
    if params is None:
        raise ValueError('Parameters may not be None.')
    params.set_parameter(CONNECTION_TIMEOUT, timeout)


def _field_value(name, value):
    kind = value.WhichOneof('kind')
    if kind == 'number_value':
        number = value.number_value
        return int(number) if number.is_integer() else number
    if kind == 'string_value':
        return value.string_value
    if kind == 'bool_value':
        return value.bool_value
    if kind == 'null_value':
        return None
    raise RuntimeError('Unsupported value for parameter {}: {}'.format(name, kind))


def read_params(filename):
    logger = logging.getLogger(__name__)
    try:
        with open(filename, 'r') as f:
            struct = json_format.Parse(f.read(), Struct())
    except OSError as exc:
        raise RuntimeError('Cannot read config {}: {}'.format(filename, exc))
    except json_format.ParseError as exc:
        raise RuntimeError('Bad config {}: {}'.format(filename, exc))
    logger.debug('Read config {}: {}'.format(filename, MessageToString(struct, as_one_line=True)))
    params = ConnectionParams()
    for name, value in struct.fields.items():
        value = _field_value(name, value)
        if value is not None:
            params.set_parameter(name, value)
    return params
