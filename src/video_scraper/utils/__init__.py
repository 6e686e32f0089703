from .logger import setup_cli_logging

__all__ = ["setup_cli_logging"]
