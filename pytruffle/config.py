#!/usr/bin/env python3

from .loader import load_document

class config:
  host = "127.0.0.1"
  port = 8545
  network_id = "*"
  gas = 6700000
  network = "development"
  toolchain = "solc"
  solc_version = "^0.4.24"
  config_file = "truffle-config.yaml"
  output_format = "yaml"

def default_data():
  '''The built-in configuration, in canonical shape'''
  return {
    "networks": {
      config.network: {
        "host": config.host,
        "port": config.port,
        "network_id": config.network_id,
        "gas": config.gas,
      }
    },
    "compilers": {
      config.toolchain: {
        "version": config.solc_version,
      }
    },
  }

DEFAULT_DOCUMENT = load_document(default_data())
