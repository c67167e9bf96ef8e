#!/usr/bin/env python3

import json
from typing import Mapping
import yaml
from dacite import Config, DaciteError, from_dict
from .document import CompilerSpec, ConfigDocument, NetworkProfile
from .errors import MalformedConfigError, NotFoundError, UnreadableConfigError
from .utils import get_file_format

FORMATS = ("json", "yaml")

def to_int(value):
    '''Coerces integral floats and decimal strings; anything else is left for the type check'''
    if isinstance(value, bool):
        raise MalformedConfigError("expected an integer, got a boolean: " + str(value))
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise MalformedConfigError("expected an integer: " + repr(value)) from None
    return value

dacite_config = Config(type_hooks={int: to_int})

def unique_pairs(pairs):
    '''JSON object hook that rejects repeated keys'''
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise MalformedConfigError("duplicate key: " + repr(key))
        obj[key] = value
    return obj

class UniqueKeyLoader(yaml.SafeLoader):
    '''SafeLoader that rejects repeated mapping keys instead of keeping the last one'''

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            try:
                duplicate = key in seen
            except TypeError:
                # unhashable keys are reported by SafeConstructor
                continue
            if duplicate:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    "found duplicate key " + repr(key), key_node.start_mark)
            seen.add(key)
        return super().construct_mapping(node, deep=deep)

def build(data_class, data, location):
    '''Builds `data_class` from `data`, reporting failures against `location`'''
    if not isinstance(data, Mapping):
        raise MalformedConfigError(location + ": expected a mapping, got " + type(data).__name__)
    try:
        return from_dict(data_class=data_class, data=dict(data), config=dacite_config)
    except (DaciteError, MalformedConfigError) as err:
        raise MalformedConfigError(location + ": " + str(err)) from err

def load_section(data, section, data_class):
    if section not in data:
        raise MalformedConfigError("missing section: " + section)
    entries = data[section]
    if not isinstance(entries, Mapping):
        raise MalformedConfigError(section + ": expected a mapping, got " + type(entries).__name__)
    result = {}
    for name, entry in entries.items():
        if not isinstance(name, str):
            raise MalformedConfigError(section + ": keys must be strings, got " + repr(name))
        result[name] = build(data_class, entry, section + "." + name)
    return result

def load_document(data: Mapping) -> ConfigDocument:
    '''Validates a parsed configuration object and builds the immutable document'''
    if not isinstance(data, Mapping):
        raise MalformedConfigError("configuration must be a mapping, got " + type(data).__name__)
    return ConfigDocument(
        networks=load_section(data, "networks", NetworkProfile),
        compilers=load_section(data, "compilers", CompilerSpec),
    )

def loads(text: str, fmt: str = "yaml") -> ConfigDocument:
    if fmt == "json":
        try:
            data = json.loads(text, object_pairs_hook=unique_pairs)
        except ValueError as err:
            raise MalformedConfigError("invalid JSON: " + str(err)) from err
    elif fmt == "yaml":
        try:
            data = yaml.load(text, Loader=UniqueKeyLoader)
        except yaml.YAMLError as err:
            raise MalformedConfigError("invalid YAML: " + str(err)) from err
    else:
        raise ValueError("unknown format: " + str(fmt))
    return load_document(data)

def load_file(file_path: str) -> ConfigDocument:
    '''Reads a JSON or YAML configuration file, picking the format from its extension'''
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise NotFoundError("configuration file not found: " + file_path) from None
    except UnicodeDecodeError as err:
        raise MalformedConfigError("invalid encoding in " + file_path + ": " + str(err)) from err
    except OSError as err:
        raise UnreadableConfigError("cannot read configuration file " + file_path + ": " + str(err)) from err
    return loads(text, get_file_format(file_path))

def dumps(document: ConfigDocument, fmt: str = "yaml") -> str:
    '''Serializes `document` to its canonical form'''
    data = document.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, sort_keys=True) + "\n"
    elif fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=True)
    raise ValueError("unknown format: " + str(fmt))

def dump(document: ConfigDocument, file_path: str):
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(dumps(document, get_file_format(file_path)))
