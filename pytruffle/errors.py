#!/usr/bin/env python3

class ConfigError(Exception):
    '''Base class for every configuration error raised by pytruffle.'''

class NotFoundError(ConfigError, KeyError):
    '''A requested network profile, compiler toolchain or config file does not exist.'''

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return Exception.__str__(self)

class MalformedConfigError(ConfigError, ValueError):
    '''A required field is missing, has the wrong type or is out of range.'''

class UnreadableConfigError(ConfigError, OSError):
    '''A configuration file exists but cannot be read, e.g. it is a directory or lacks permissions.'''
