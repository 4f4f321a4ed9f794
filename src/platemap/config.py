"""
Configuration module for platemap.
Holds plotting and logging defaults and handles loading and saving them.
"""
import os
import json
import logging

from platformdirs import user_config_dir

from .core.analysis.classifier import DEFAULT_THRESHOLD
from .core.visualization.palette import DEFAULT_PALETTE


class Config:
    """Class to manage platemap defaults."""

    def __init__(self, config_file=None):
        """
        Initialize configuration with default values.

        Args:
            config_file (str, optional): JSON file to load from and save to.
                Defaults to platemap_config.json in the user config directory.
        """
        if config_file is None:
            config_file = os.path.join(user_config_dir("Platemap"), "platemap_config.json")
        self.config_file = config_file
        self.threshold = float(DEFAULT_THRESHOLD)
        self.palette = DEFAULT_PALETTE
        self.show_values = False
        self.scale = False
        self.log_level = "INFO"
        self.log_dir = ""  # No log file unless set

    def plot_options(self):
        """Keyword arguments for hit_map."""
        return {
            "threshold": self.threshold,
            "palette": self.palette,
            "show_values": self.show_values,
            "scale": self.scale,
        }

    def save(self):
        """
        Save configuration to file.

        Returns:
            bool: True if the file was written.
        """
        config_data = {
            "threshold": self.threshold,
            "palette": self.palette,
            "show_values": self.show_values,
            "scale": self.scale,
            "log_level": self.log_level,
            "log_dir": self.log_dir
        }

        try:
            config_dir = os.path.dirname(self.config_file)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(config_data, f, indent=2)
            return True
        except OSError as e:
            logging.getLogger('platemap').error(f"Error saving configuration to {self.config_file}: {e}")
            return False

    def load(self):
        """
        Load configuration from file.

        Fields with the wrong type keep their default value.

        Returns:
            bool: True if the file existed and was read.
        """
        if not os.path.exists(self.config_file):
            return False

        try:
            with open(self.config_file, 'r') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            logging.getLogger('platemap').error(f"Error loading configuration: {e}")
            return False

        if not isinstance(config_data, dict):
            logging.getLogger('platemap').error(
                f"Error loading configuration: expected a JSON object in {self.config_file}"
            )
            return False

        threshold = config_data.get("threshold", self.threshold)
        if isinstance(threshold, (int, float)) and not isinstance(threshold, bool):
            self.threshold = float(threshold)

        palette = config_data.get("palette", self.palette)
        if isinstance(palette, str):
            self.palette = palette

        show_values = config_data.get("show_values", self.show_values)
        if isinstance(show_values, bool):
            self.show_values = show_values

        scale = config_data.get("scale", self.scale)
        if isinstance(scale, bool):
            self.scale = scale

        log_level = config_data.get("log_level", self.log_level)
        if isinstance(log_level, str):
            self.log_level = log_level

        log_dir = config_data.get("log_dir", self.log_dir)
        if isinstance(log_dir, str):
            self.log_dir = log_dir

        return True
