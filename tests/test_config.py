import json

import pytest

from bridgecfg.config import Config, ConfigError, load
from bridgecfg.network import hex_to_address, network_config

TOML_WITH_NETWORK = """
[Log]
Level = "debug"

[BridgeServer]
GRPCPort = "9090"
MaxPageLimit = 100
Enabled = true

[BridgeServer.DB]
Host = "localhost"

[NetworkConfig]
GenBlockNumber = 1
PolygonBridgeAddress = "0xff0EE8ea08cEf5cb4322777F5CC3E8A584B8A4A0"
L2PolygonBridgeAddresses = ["0xff0EE8ea08cEf5cb4322777F5CC3E8A584B8A4A0"]
L1ChainID = 1337
"""

TOML_WITHOUT_NETWORK = """
[BridgeServer]
GRPCPort = "9090"
MaxPageLimit = 100
Enabled = true
"""


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_network_section_from_file(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITH_NETWORK)
    cfg = load(path, "", environ={})
    assert cfg.network_config.l1_chain_id == 1337
    assert cfg.network_config.polygon_bridge_address == hex_to_address(
        "0xff0EE8ea08cEf5cb4322777F5CC3E8A584B8A4A0"
    )
    assert "NetworkConfig" not in cfg.sections
    assert cfg.sections["Log"]["Level"] == "debug"


def test_network_in_file_and_flag_is_rejected(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITH_NETWORK)
    with pytest.raises(ConfigError, match="provided in the config file"):
        load(path, "testnet", environ={})


def test_no_network_at_all_is_rejected(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    with pytest.raises(ConfigError, match="not provided"):
        load(path, "", environ={})


def test_network_flag_selects_known_network(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    cfg = load(path, "testnet", environ={})
    assert cfg.network_config == network_config("testnet")
    assert cfg.sections["BridgeServer"]["MaxPageLimit"] == 100


def test_missing_file_with_flag(tmp_path):
    cfg = load(str(tmp_path / "absent.toml"), "local", environ={})
    assert cfg.sections == {}
    assert cfg.network_config == network_config("local")


def test_empty_path_with_flag():
    cfg = load("", "internaltestnet", environ={})
    assert cfg.network_config == network_config("internaltestnet")


def test_unknown_network_flag_falls_back_to_mainnet():
    cfg = load("", "nosuchnet", environ={})
    assert cfg.network_config == network_config("mainnet")


def test_environment_overrides(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITH_NETWORK)
    environ = {
        "ZKEVM_BRIDGE_BRIDGESERVER_MAXPAGELIMIT": "50",
        "ZKEVM_BRIDGE_BRIDGESERVER_ENABLED": "false",
        "ZKEVM_BRIDGE_BRIDGESERVER_DB_HOST": "db.example.com",
        "ZKEVM_BRIDGE_NETWORKCONFIG_L1CHAINID": "5",
    }
    cfg = load(path, "", environ=environ)
    server = cfg.sections["BridgeServer"]
    assert server["MaxPageLimit"] == 50
    assert server["Enabled"] is False
    assert server["DB"]["Host"] == "db.example.com"
    assert server["GRPCPort"] == "9090"
    assert cfg.network_config.l1_chain_id == 5


def test_environment_unknown_key_ignored(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    cfg = load(path, "local", environ={"ZKEVM_BRIDGE_OTHER_KEY": "x"})
    assert set(cfg.sections) == {"BridgeServer"}


def test_environment_bad_integer(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    with pytest.raises(ConfigError):
        load(path, "local", environ={"ZKEVM_BRIDGE_BRIDGESERVER_MAXPAGELIMIT": "many"})


def test_environment_bad_boolean(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    with pytest.raises(ConfigError):
        load(path, "local", environ={"ZKEVM_BRIDGE_BRIDGESERVER_ENABLED": "maybe"})


def test_malformed_toml(tmp_path):
    path = write(tmp_path, "config.toml", "[broken\n")
    with pytest.raises(ConfigError):
        load(path, "local", environ={})


def test_unsupported_extension(tmp_path):
    path = write(tmp_path, "config.ini", "[x]\n")
    with pytest.raises(ConfigError, match="unsupported"):
        load(path, "local", environ={})


def test_json_file(tmp_path):
    data = {"Log": {"Level": "info"}, "NetworkConfig": {"L1ChainID": 5}}
    path = write(tmp_path, "config.json", json.dumps(data))
    cfg = load(path, "", environ={})
    assert cfg.sections == {"Log": {"Level": "info"}}
    assert cfg.network_config.l1_chain_id == 5


def test_to_json_round_trip(tmp_path):
    path = write(tmp_path, "config.toml", TOML_WITHOUT_NETWORK)
    cfg = load(path, "testnet", environ={})
    data = json.loads(cfg.to_json())
    assert data["BridgeServer"] == cfg.sections["BridgeServer"]
    assert data["NetworkConfig"] == network_config("testnet").as_dict()


def test_to_json_of_empty_config():
    data = json.loads(Config().to_json())
    assert list(data) == ["NetworkConfig"]
    assert data["NetworkConfig"]["L2PolygonBridgeAddresses"] == []