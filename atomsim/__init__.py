"""Quantum atom sandbox: element catalog, shell allocation and sandbox UI."""
