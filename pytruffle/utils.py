#!/usr/bin/python3
import sys
from os import path
class colors:
    reset = '\033[0m'

    class fg:
        red = '\033[31m'
        green = '\033[32m'
        orange = '\033[33m'
        cyan = '\033[36m'

def notif(msg, color=colors.reset):
    sys.stderr.write(color + "== " + msg + '\n' + colors.reset)
    sys.stderr.flush()

def fatal(msg, code=1):
    notif(msg, colors.fg.red)
    sys.exit(code)

def get_file_format(file_path, default="yaml"):
    '''Maps the extension of `file_path` to a serialization format name'''
    extension = path.splitext(file_path)[1].lower()
    if extension == ".json":
        return "json"
    if extension in (".yml", ".yaml"):
        return "yaml"
    return default
