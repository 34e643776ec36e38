"""Page objects, purchase flow and REST contract checks for SauceDemo and JSONPlaceholder."""

__version__ = "0.1.0"
