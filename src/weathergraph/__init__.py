"""
WeatherGraph: a day/night shaded temperature chart over a zoomable time window.
"""

from weathergraph.constants import app as _app

__version__ = _app.VERSION
