"""Edge-weighted graphs: DIMACS input, transforms, generators and the San Segundo bound."""

__version__ = "0.1.0"