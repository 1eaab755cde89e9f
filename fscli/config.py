"""Configuration management for fscli"""

import os


class Config:
    """Configuration for the fscli shell"""

    def __init__(self):
        self.start_dir = os.getcwd()
        home = os.path.expanduser("~")
        self.history_file = os.getenv('FSCLI_HISTFILE', os.path.join(home, ".fscli_history"))
        self.log_level = os.getenv('FSCLI_LOG_LEVEL', 'WARNING').upper()

    @classmethod
    def from_env(cls):
        """Create configuration from environment variables"""
        return cls()

    @classmethod
    def from_args(cls, start_dir: str = None, history_file: str = None, log_level: str = None):
        """Create configuration from command line arguments"""
        config = cls()
        if start_dir:
            config.start_dir = os.path.abspath(start_dir)
        if history_file:
            config.history_file = os.path.expanduser(history_file)
        if log_level:
            config.log_level = log_level.upper()
        return config

    def __repr__(self):
        return (f"Config(start_dir={self.start_dir}, history_file={self.history_file}, "
                f"log_level={self.log_level})")
