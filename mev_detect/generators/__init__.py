"""Synthetic data generators."""

from mev_detect.generators.cluster import UNISWAP_V2_ROUTER, ClusterGenerator

__all__ = ["ClusterGenerator", "UNISWAP_V2_ROUTER"]
