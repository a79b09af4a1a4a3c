"""An interactive ocean scene whose sky, lights and water follow a sun slider."""

__version__ = "0.1.0"
