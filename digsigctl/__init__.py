"""Controller, RPC server and preferences repair tool for digital signage systems."""

__version__ = "0.1.20"