"""Unit tests for configuration and cluster presets."""

import dataclasses

import pytest

from licensechain_solana.config import SolanaConfig, find_cluster, get_cluster_info, get_solana_config
from licensechain_solana.utils.errors import ValidationError


def test_defaults():
    config = SolanaConfig(api_key="key")

    assert config.base_url == "https://api.licensechain.com"
    assert config.rpc_url == "https://api.mainnet-beta.solana.com"
    assert config.timeout == 30000
    assert config.timeout_seconds == 30.0
    assert config.retries == 3
    assert config.commitment == "confirmed"


def test_config_is_immutable(config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"


def test_trailing_slash_removed_from_base_url():
    assert SolanaConfig(api_key="key", base_url="https://api.licensechain.com/").base_url == (
        "https://api.licensechain.com"
    )


def test_repr_masks_api_key():
    assert "secret-key" not in repr(SolanaConfig(api_key="secret-key"))


@pytest.mark.parametrize("overrides", [
    {"api_key": ""},
    {"base_url": "not a url"},
    {"rpc_url": "ftp://rpc.example.com"},
    {"rpc_url": "https://rpc.example.com\n"},
    {"base_url": "https://api.example.com/\n"},
    {"timeout": 0},
    {"retries": -1},
    {"commitment": "max"},
])
def test_invalid_values_rejected(overrides):
    values = {"api_key": "key", **overrides}

    with pytest.raises(ValidationError):
        SolanaConfig(**values)


def test_get_solana_config_from_environment(clean_env):
    clean_env.setenv("LICENSECHAIN_API_KEY", "env-key")
    clean_env.setenv("SOLANA_RPC_URL", "https://api.devnet.solana.com")
    clean_env.setenv("LICENSECHAIN_TIMEOUT", "5000")
    clean_env.setenv("SOLANA_COMMITMENT", "FINALIZED")

    config = get_solana_config(env_file="/nonexistent/.env")

    assert config.api_key == "env-key"
    assert config.rpc_url == "https://api.devnet.solana.com"
    assert config.timeout == 5000
    assert config.commitment == "finalized"
    assert config.base_url == "https://api.licensechain.com"


def test_get_solana_config_from_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LICENSECHAIN_API_KEY=file-key\nLICENSECHAIN_RETRIES=5\n")

    config = get_solana_config(env_file=str(env_file))

    assert config.api_key == "file-key"
    assert config.retries == 5


def test_get_solana_config_requires_api_key(clean_env):
    with pytest.raises(ValidationError):
        get_solana_config(env_file="/nonexistent/.env")


def test_get_solana_config_rejects_bad_integer(clean_env):
    clean_env.setenv("LICENSECHAIN_API_KEY", "env-key")
    clean_env.setenv("LICENSECHAIN_TIMEOUT", "soon")

    with pytest.raises(ValidationError):
        get_solana_config(env_file="/nonexistent/.env")


def test_get_cluster_info():
    devnet = get_cluster_info("devnet")

    assert devnet.name == "Devnet"
    assert devnet.rpc_url == "https://api.devnet.solana.com"
    assert devnet.ws_url == "wss://api.devnet.solana.com"


def test_get_cluster_info_unknown():
    with pytest.raises(ValidationError):
        get_cluster_info("localnet")


def test_find_cluster():
    assert find_cluster("https://api.testnet.solana.com/").name == "Testnet"
    assert find_cluster("https://rpc.example.com") is None
