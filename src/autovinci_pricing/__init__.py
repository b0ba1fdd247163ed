"""Autovinci pricing — EMI, on-road price and rupee formatting for the car marketplace."""

__version__ = "1.0.0"
