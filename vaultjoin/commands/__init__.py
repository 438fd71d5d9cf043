"""Command implementations behind the vaultjoin CLI."""
