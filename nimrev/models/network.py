"""Supported blockchain networks"""
from enum import Enum


class Network(str, Enum):
    SOLANA = "solana"
    ETHEREUM = "ethereum"
    BASE = "base"
    BLAST = "blast"
    POLYGON = "polygon"
    AVALANCHE = "avalanche"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"

    @classmethod
    def values(cls):
        return [network.value for network in cls]
