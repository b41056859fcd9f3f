"""Built-in network presets.

Each preset supplies the baseline passphrase, history archive URLs and
default streaming-engine config payload for a well-known network.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledgerbridge.models import NetworkName

PUBLIC_NETWORK_PASSPHRASE = "Public Global Stellar Network ; September 2015"
TEST_NETWORK_PASSPHRASE = "Test SDF Network ; September 2015"

PUBLIC_ARCHIVE_URLS = (
    "https://history.stellar.org/prd/core-live/core_live_001",
    "https://history.stellar.org/prd/core-live/core_live_002",
    "https://history.stellar.org/prd/core-live/core_live_003",
)

TEST_ARCHIVE_URLS = (
    "https://history.stellar.org/prd/core-testnet/core_testnet_001",
    "https://history.stellar.org/prd/core-testnet/core_testnet_002",
    "https://history.stellar.org/prd/core-testnet/core_testnet_003",
)

PUBLIC_DEFAULT_CONFIG = b'''\
NETWORK_PASSPHRASE="Public Global Stellar Network ; September 2015"
FAILURE_SAFETY=1

[[HOME_DOMAINS]]
HOME_DOMAIN="stellar.org"
QUALITY="HIGH"

[[VALIDATORS]]
NAME="sdf_1"
HOME_DOMAIN="stellar.org"
PUBLIC_KEY="GCGB2S2KGYARPVIA37HYZXVRM2YZUEXA6S33ZU5BUDC6THSB62LZSTYH"
ADDRESS="core-live-a.stellar.org:11625"
HISTORY="curl -sf https://history.stellar.org/prd/core-live/core_live_001/{0} -o {1}"

[[VALIDATORS]]
NAME="sdf_2"
HOME_DOMAIN="stellar.org"
PUBLIC_KEY="GCM6QMP3DLRPTAZW2UZPCPX2LF3SXWXKPMP3GKFZBDSF3QZGRM3A4QW7"
ADDRESS="core-live-b.stellar.org:11625"
HISTORY="curl -sf https://history.stellar.org/prd/core-live/core_live_002/{0} -o {1}"

[[VALIDATORS]]
NAME="sdf_3"
HOME_DOMAIN="stellar.org"
PUBLIC_KEY="GABMKJM6I25XI4K7U6XWMULOUQIQ27BCTMLS6BYYSOWKTBUXVRJSXHYQ"
ADDRESS="core-live-c.stellar.org:11625"
HISTORY="curl -sf https://history.stellar.org/prd/core-live/core_live_003/{0} -o {1}"
'''

TEST_DEFAULT_CONFIG = b'''\
NETWORK_PASSPHRASE="Test SDF Network ; September 2015"
UNSAFE_QUORUM=true
FAILURE_SAFETY=1

[[HOME_DOMAINS]]
HOME_DOMAIN="testnet.stellar.org"
QUALITY="HIGH"

[[VALIDATORS]]
NAME="sdf_testnet_1"
HOME_DOMAIN="testnet.stellar.org"
PUBLIC_KEY="GDKXE2OZMJIPOSLNA6N6F2BVCI3O777I2OOC4BV7VOYUEHYX7RTRYA7Y"
ADDRESS="core-testnet1.stellar.org"
HISTORY="curl -sf https://history.stellar.org/prd/core-testnet/core_testnet_001/{0} -o {1}"

[[VALIDATORS]]
NAME="sdf_testnet_2"
HOME_DOMAIN="testnet.stellar.org"
PUBLIC_KEY="GCUCJTIYXSOXKBSNFGNFWW5MUQ54HKRPGJUTQFJ5RQXZXNOLNXYDHRAP"
ADDRESS="core-testnet2.stellar.org"
HISTORY="curl -sf https://history.stellar.org/prd/core-testnet/core_testnet_002/{0} -o {1}"

[[VALIDATORS]]
NAME="sdf_testnet_3"
HOME_DOMAIN="testnet.stellar.org"
PUBLIC_KEY="GC2V2EFSXN6SQTWVYA5EPJPBWWIMSD2XQNKUOHGEKB535AQE2I6IXV2Z"
ADDRESS="core-testnet3.stellar.org"
HISTORY="curl -sf https://history.stellar.org/prd/core-testnet/core_testnet_003/{0} -o {1}"
'''


@dataclass(frozen=True)
class NetworkPreset:
    name: NetworkName
    passphrase: str
    archive_urls: tuple[str, ...]
    default_config: bytes


PRESETS: dict[NetworkName, NetworkPreset] = {
    NetworkName.PUBLIC: NetworkPreset(
        NetworkName.PUBLIC, PUBLIC_NETWORK_PASSPHRASE, PUBLIC_ARCHIVE_URLS, PUBLIC_DEFAULT_CONFIG,
    ),
    NetworkName.TEST: NetworkPreset(
        NetworkName.TEST, TEST_NETWORK_PASSPHRASE, TEST_ARCHIVE_URLS, TEST_DEFAULT_CONFIG,
    ),
}

# Accepted spellings in the config document's ``network`` key.
_ALIASES = {
    "pubnet": NetworkName.PUBLIC,
    "public": NetworkName.PUBLIC,
    "testnet": NetworkName.TEST,
    "test": NetworkName.TEST,
}


def lookup(name: str) -> NetworkPreset | None:
    """Preset for a network name or alias, None if unknown."""
    key = _ALIASES.get(name.strip().lower())
    return PRESETS.get(key) if key is not None else None


__all__ = [
    "PRESETS",
    "PUBLIC_ARCHIVE_URLS",
    "PUBLIC_NETWORK_PASSPHRASE",
    "TEST_ARCHIVE_URLS",
    "TEST_NETWORK_PASSPHRASE",
    "NetworkPreset",
    "lookup",
]
