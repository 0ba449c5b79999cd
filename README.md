# bridgecfg

Reads the configuration of a bridge service from a TOML or JSON file, lets
environment variables override its values, and supplies the network details
(contract addresses, genesis block, L1 chain id) of the known deployments.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading a configuration

```python
from bridgecfg.config import load

cfg = load("config/bridge.toml", "testnet", environ={})
print(cfg.network_config.l1_chain_id)
print(cfg.to_json())
```

`load(config_file_path="", network="", environ=None)` works as follows:

- If `config_file_path` names an existing file, it is parsed. The file type
  is taken from the suffix: `.toml` or `.json`. Any other suffix, a parse
  error, or a top level that is not a table raises `ConfigError`. An empty
  path or a missing file is logged as "config file not found" and treated
  as an empty configuration.
- Environment variables then override values that are already present in
  the file. The variable name is `ZKEVM_BRIDGE_` followed by the key path in
  upper case, joined with underscores (dots in a key also become
  underscores); for example `ZKEVM_BRIDGE_SYNCDB_PORT` overrides `Port` in
  the `[SyncDB]` table. The new value is converted to the type of the value
  it replaces: booleans accept `1`/`t`/`true`/`0`/`f`/`false`, integers
  accept any base prefix such as `0x`, lists are split on whitespace. A value
  that does not convert raises `ConfigError`. When `environ` is `None`,
  `os.environ` is used.
- The network details must come from exactly one place: a `[NetworkConfig]`
  section in the file (the name is matched case-insensitively), or the
  `network` argument. Giving both, or neither, raises `ConfigError`. An
  unknown network name falls back to `mainnet`.

The result is a `Config` with two members:

- `sections`: the file's tables and values, with overrides applied and the
  `NetworkConfig` section removed;
- `network_config`: a `NetworkConfig`.

`Config.to_json()` renders both as indented JSON, with the network settings
under the `NetworkConfig` key.

## Network presets

```python
from bridgecfg.network import network_config, hex_to_address

mainnet = network_config("mainnet")
print(mainnet.l1_chain_id, mainnet.polygon_bridge_address)
print(hex_to_address("0x2a3DD3EB832aF982ec71669E178424b10Dca2EDe"))
# 0x2a3dd3eb832af982ec71669e178424b10dca2ede
```

Known names are `mainnet`, `testnet`, `internaltestnet` and `local`; the
presets are in `NETWORK_CONFIGS`.

`NetworkConfig` is a frozen dataclass with the fields `gen_block_number`,
`polygon_zkevm_address`, `polygon_bridge_address`,
`polygon_zkevm_global_exit_root_address`, `matic_token_address`,
`l2_polygon_bridge_addresses` and `l1_chain_id`. Addresses are normalised
with `hex_to_address`, which returns a 20-byte lower-case `0x` address
(longer input keeps its last 20 bytes, shorter input is left-padded with
zeros, non-hex input raises `ValueError`).

`NetworkConfig.from_mapping(data)` builds a configuration from a mapping
such as a parsed `[NetworkConfig]` table, using the keys `GenBlockNumber`,
`PolygonZkEVMAddress`, `PolygonBridgeAddress`,
`PolygonZkEVMGlobalExitRootAddress`, `MaticTokenAddress`,
`L2PolygonBridgeAddresses` and `L1ChainID` in any letter case; other keys
are ignored. `NetworkConfig.as_dict()` turns it back into a dictionary under
those keys.

## What this package does not do

It only loads and checks configuration. It does not run a bridge service,
synchronise chain data, talk to nodes or databases, or serve an API, and it
provides no command-line program. It does not check or convert the sections
other than `NetworkConfig` beyond the environment overrides described above.