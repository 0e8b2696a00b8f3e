"""Utility modules for WeatherGraph."""
