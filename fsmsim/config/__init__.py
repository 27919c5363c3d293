"""Configuration module for fsmsim."""

from fsmsim.config.settings import SimulatorConfig, load_config

__all__ = ["SimulatorConfig", "load_config"]
