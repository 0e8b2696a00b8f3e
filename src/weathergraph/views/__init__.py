"""Views submodule for WeatherGraph."""
