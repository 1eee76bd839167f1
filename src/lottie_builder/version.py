"""Package version module."""

VERSION = '0.1.0'
