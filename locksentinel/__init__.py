"""locksentinel — audit pnpm lock files for known-compromised packages."""

__version__ = "0.1.0"
