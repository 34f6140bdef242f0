"""gcctl - Inventory and prune Nix garbage collection roots."""

__version__ = "0.1.0"
