"""litcal: liturgical calendar date engine."""

__version__ = "0.3.0"
