__version__ = "20261018"
