from typing import Final

# OpenWeather 2.5 endpoints
CURRENT_WEATHER_URL: Final = "https://api.openweathermap.org/data/2.5/weather"
FORECAST_URL: Final = "https://api.openweathermap.org/data/2.5/forecast"

# Unit system requested from the provider; not user-configurable
UNITS: Final = "metric"
TEMPERATURE_UNIT: Final = "°C"
WIND_SPEED_UNIT: Final = "m/s"

# Environment variable holding the provider API key
API_KEY_ENV: Final = "OPENWEATHER_API_KEY"

# Default dotenv file read before settings are resolved
DEFAULT_ENV_FILE: Final = ".env"

# Seconds to wait for the provider before giving up
DEFAULT_TIMEOUT: Final = 10.0

# Placeholders used when the provider sends no condition entries
NO_CONDITION_MAIN: Final = "N/A"
NO_CONDITION_DESCRIPTION: Final = "No specific conditions"

RULE: Final = "-" * 36

# Display formats for forecast day labels and wall-clock times
DEFAULT_TIME_FORMAT: Final = "%H:%M"
DEFAULT_DATE_FORMAT: Final = "%Y-%m-%d (%a)"
