from docpass.cli import app

app(prog_name="docpass")
