"""nestegg — home-buying finance calculators."""

__version__ = "0.1.0"
