import io
import json
import os
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from unittest import TestCase

from pytruffle.__main__ import main
from pytruffle.config import DEFAULT_DOCUMENT
from pytruffle.loader import dump, load_file, loads


class TestCli(TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.cwd = os.getcwd()
        os.chdir(self.tmp.name)

    def tearDown(self):
        os.chdir(self.cwd)
        self.tmp.cleanup()

    def run_cli(self, args):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            main(args)
        return stdout.getvalue(), stderr.getvalue()

    def write_config(self, file_name, text):
        with open(file_name, "w") as f:
            f.write(text)
        return file_name

    def test_cli_empty_call_then_systemexit(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli([])
        self.assertEqual(2, ctx.exception.code)

    def test_networks_uses_built_in_configuration(self):
        stdout, stderr = self.run_cli(["networks"])
        self.assertEqual("development\n", stdout)
        self.assertIn("built-in", stderr)

    def test_network_default_profile(self):
        stdout, _ = self.run_cli(["network"])
        self.assertEqual(
            {"host": "127.0.0.1", "port": 8545, "network_id": "*", "gas": 6700000},
            json.loads(stdout))

    def test_compiler(self):
        stdout, _ = self.run_cli(["compiler", "solc"])
        self.assertEqual({"version": "^0.4.24"}, json.loads(stdout))

    def test_unknown_network_then_exit_1(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(["network", "mainnet"])
        self.assertEqual(1, ctx.exception.code)

    def test_config_file_in_working_directory(self):
        self.write_config("truffle-config.yaml", "networks:\n  ganache:\n    host: localhost\n    port: 7545\n"
                          "    network_id: 5777\n    gas: 8000000\ncompilers: {}\n")
        stdout, stderr = self.run_cli(["networks"])
        self.assertEqual("ganache\n", stdout)
        self.assertIn("truffle-config.yaml", stderr)

    def test_explicit_config_file(self):
        config_file = self.write_config("custom.json", json.dumps(DEFAULT_DOCUMENT.to_dict()))
        stdout, _ = self.run_cli(["-c", config_file, "compiler"])
        self.assertEqual({"version": "^0.4.24"}, json.loads(stdout))

    def test_malformed_config_then_exit_1(self):
        config_file = self.write_config("broken.yaml", "networks:\n  development:\n    host: localhost\ncompilers: {}\n")
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(["-c", config_file, "networks"])
        self.assertEqual(1, ctx.exception.code)

    def test_directory_config_then_exit_1(self):
        os.mkdir("configs")
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(["-c", "configs", "networks"])
        self.assertEqual(1, ctx.exception.code)

    def test_invalid_utf8_config_then_exit_1(self):
        with open("latin1.yaml", "wb") as f:
            f.write(b"networks: {}\ncompilers: {}\n# \xff\xfe\n")
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(["-c", "latin1.yaml", "networks"])
        self.assertEqual(1, ctx.exception.code)

    def test_missing_config_then_exit_1(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(["-c", "nowhere.yaml", "networks"])
        self.assertEqual(1, ctx.exception.code)

    def test_dump_to_stdout(self):
        stdout, _ = self.run_cli(["dump", "-f", "json"])
        self.assertEqual(DEFAULT_DOCUMENT, loads(stdout, "json"))

    def test_dump_to_file(self):
        self.run_cli(["dump", "-o", "out.yaml"])
        self.assertEqual(DEFAULT_DOCUMENT, load_file("out.yaml"))

    def test_dump_converts_between_formats(self):
        dump(DEFAULT_DOCUMENT, "truffle.json")
        self.run_cli(["-c", "truffle.json", "dump", "-o", "truffle.yaml"])
        self.assertEqual(load_file("truffle.json"), load_file("truffle.yaml"))
