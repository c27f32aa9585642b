from cityweather.cli import app

app(prog_name="cityweather")
