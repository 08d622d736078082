"""siteverify - page-object verification harness for a marketing homepage."""

__version__ = "0.1.0"
