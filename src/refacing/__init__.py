"""Cabinet refacing sales wizard: project state, pricing and step navigation."""

__version__ = "0.1.0"
