"""Strongly typed identifiers for peers of a community.

Using NewType keeps peer IDs, onion addresses and full libp2p addresses
from being mixed up at call sites.
"""

from typing import NewType

# Textual libp2p peer identifier, e.g. QmZoiJNAvCffeEHBjk766nLuKVdkxkAT7wfFJDPPLsbKSE
PeerId = NewType("PeerId", str)

# Hidden-service address without the .onion suffix
OnionAddress = NewType("OnionAddress", str)

# Full multiaddr, e.g. /dns4/<onion>.onion/tcp/443/ws/p2p/<peer id>
P2PAddress = NewType("P2PAddress", str)
