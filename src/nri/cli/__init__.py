"""Nri CLI layer. The ``nri`` console script runs ``nri.cli.main:main``."""
