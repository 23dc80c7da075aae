"""
PassGauge Shared Module
=======================

Configuration, structured logging, console presentation and result
models shared by the PassGauge engine and CLI.
"""

from shared.config import GaugeConfig, get_config

__all__ = ["GaugeConfig", "get_config"]
