from ldcconf.cli import app

app(prog_name="ldcconf")
