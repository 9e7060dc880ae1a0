from zipentrytools import app

app(prog_name="zipentrytools")
