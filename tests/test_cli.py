# -*- coding: utf-8 -*-
"""
Tests for dtk.__main__ - Command line front end.

Created
-------
2026-10-19
"""

import io
import json
import uuid

import pytest

from dtk.__main__ import main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config resolution at an empty temp location."""
    monkeypatch.setenv("DTK_CONFIG_PATH", str(tmp_path / "dtk_config.json"))
    return tmp_path / "dtk_config.json"


class TestBase64Command:
    def test_encode(self, capsys):
        assert main(["base64", "encode", "Hello World"]) == 0
        assert capsys.readouterr().out.strip() == "SGVsbG8gV29ybGQ="

    def test_decode(self, capsys):
        assert main(["base64", "decode", "SGVsbG8gV29ybGQ="]) == 0
        assert capsys.readouterr().out.strip() == "Hello World"

    def test_decode_invalid(self, capsys):
        assert main(["base64", "decode", "not base64!"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("SGk=\n"))
        assert main(["base64", "decode", "-"]) == 0
        assert capsys.readouterr().out.strip() == "Hi"


class TestOtherCodecCommands:
    def test_url_roundtrip(self, capsys):
        assert main(["url", "encode", "a b&c"]) == 0
        encoded = capsys.readouterr().out.strip()
        assert encoded == "a+b%26c"
        assert main(["url", "decode", encoded]) == 0
        assert capsys.readouterr().out.strip() == "a b&c"

    def test_hash_default(self, capsys):
        assert main(["hash", "abc"]) == 0
        assert capsys.readouterr().out.strip().startswith("ba7816bf")

    def test_hash_algorithm_option(self, capsys):
        assert main(["hash", "abc", "--algorithm", "MD5"]) == 0
        assert capsys.readouterr().out.strip() == "900150983cd24fb0d6963f7d28e17f72"

    def test_hash_unknown_algorithm(self, capsys):
        assert main(["hash", "abc", "-a", "crc32"]) == 1
        assert "Unknown hash algorithm" in capsys.readouterr().err

    def test_hash_algorithm_from_config(self, capsys, isolated_config):
        isolated_config.write_text(json.dumps({"hash_algorithm": "md5"}))
        assert main(["hash", "abc"]) == 0
        assert capsys.readouterr().out.strip() == "900150983cd24fb0d6963f7d28e17f72"

    def test_uuid_count(self, capsys):
        assert main(["uuid", "-n", "3"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 3
        assert all(uuid.UUID(v).version == 4 for v in lines)

    def test_uuid_bad_count(self, capsys):
        assert main(["uuid", "--count", "0"]) == 1

    def test_ulid_count(self, capsys):
        assert main(["ulid", "-n", "4"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 4
        assert all(len(v) == 26 for v in lines)

    def test_ulid_count_from_config(self, capsys, isolated_config):
        isolated_config.write_text(json.dumps({"uuid_count": 2}))
        assert main(["ulid"]) == 0
        assert len(capsys.readouterr().out.split()) == 2

    def test_json_minify(self, capsys):
        assert main(["json", "minify", '{ "a" : [1, 2] }']) == 0
        assert capsys.readouterr().out.strip() == '{"a":[1,2]}'

    def test_json_invalid(self, capsys):
        assert main(["json", "format", "{"]) == 1
        assert "Invalid JSON" in capsys.readouterr().err


class TestDistanceCommand:
    def test_nyc_to_la(self, capsys):
        assert main(["distance", "40.7128", "-74.0060", "34.0522", "-118.2437"]) == 0
        out = capsys.readouterr().out.strip()
        assert out.endswith(" miles)")
        km = float(out.split(" km")[0])
        assert abs(km - 3944.0) < 50.0

    def test_out_of_range(self, capsys):
        assert main(["distance", "91", "0", "0", "0"]) == 1
        assert "Latitude" in capsys.readouterr().err

    def test_non_numeric(self, capsys):
        assert main(["distance", "abc", "0", "0", "0"]) == 1
        assert "latitude" in capsys.readouterr().err


class TestCapacityCommand:
    def test_estimate(self, capsys):
        rc = main(["capacity", "--dau", "864000", "--ratio", "3:1", "--payload", "1024"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "Read per second: 7.500000 rps" in out
        assert "Write per second: 2.500000 tps" in out

    def test_zero_ratio(self, capsys):
        rc = main(["capacity", "--dau", "1000", "--ratio", "1:0", "--payload", "10"])
        assert rc == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_bad_dau(self, capsys):
        rc = main(["capacity", "--dau", "many", "--ratio", "1:1", "--payload", "10"])
        assert rc == 1
        assert "Daily Active User" in capsys.readouterr().err

    def test_huge_dau(self, capsys):
        rc = main(["capacity", "--dau", "9" * 400, "--ratio", "10:1", "--payload", "1024"])
        assert rc == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "too large" in err

    def test_bad_config_value_falls_back(self, capsys, isolated_config):
        isolated_config.write_text(json.dumps({"rate_decimals": "x"}))
        rc = main(["capacity", "--dau", "864000", "--ratio", "3:1", "--payload", "1024"])
        assert rc == 0
        assert "Read per second: 7.500000 rps" in capsys.readouterr().out


class TestToolsCommand:
    def test_lists_all(self, capsys):
        assert main(["tools"]) == 0
        out = capsys.readouterr().out
        assert "Calculators:" in out
        assert "base64" in out

    def test_filter(self, capsys):
        assert main(["tools", "gen"]) == 0
        out = capsys.readouterr().out
        assert "uuid" in out
        assert "ulid" in out
        assert "base64" not in out
