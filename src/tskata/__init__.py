"""tskata - interactive scaffolder for TypeScript kata projects."""

__version__ = "0.1.0"
